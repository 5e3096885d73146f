"""
Log - журнал вытянутых значений
===============================

Plain entries are the values themselves, labelled entries are Entry
values written by record(..., label=...).
"""

from __future__ import annotations

import typing
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Entry[A]:
    """Value pulled through a record() stage with a label."""

    label: str
    value: A


class Log[A](list[A]):
    """
    Pull journal shared by record() stages.

    Моноид поверх list:
    - empty: Log()
    - combine: конкатенация, исходные логи не меняются

    record() mutates its log in place while values are pulled; combine and
    tell are for building expected logs in assertions.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Log.of("a").combine(Log.of("b"))  # Log(["a", "b"])"""
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        """Copy with item appended."""
        return self.combine(Log.of(item))

    def labels(self) -> list[str]:
        """Distinct labels, in order of first appearance."""
        return list(dict.fromkeys(entry.label for entry in self._entries()))

    def labelled(self, label: str, /) -> list[typing.Any]:
        """
        Values recorded under label, in pull order.

            log = Log.of(Entry("src", 1), Entry("out", 2), Entry("src", 3))
            log.labelled("src")  # [1, 3]
        """
        return [entry.value for entry in self._entries() if entry.label == label]

    def _entries(self) -> Iterator[Entry[typing.Any]]:
        for entry in self:
            if isinstance(entry, Entry):
                yield entry

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


__all__ = ("Entry", "Log")
