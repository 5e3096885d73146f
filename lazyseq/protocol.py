"""
Sequence protocol
=================

What counts as a sequence in each variant, and the restartable wrappers
operators return.

- iterable:  any non-string Iterable, cursor = iter(sequence)
- generator: a generator function, cursor = sequence()
- async:     any AsyncIterable, cursor = aiter(sequence)
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from ._types import AsyncProducer, Producer

# Strings iterate, but dispatch treats them as scalars
_SCALARS = (str, bytes, bytearray)


class Reiterable[T]:
    """
    Restartable iterable over a production entry point.

    Every iter() calls the producer again, so two cursors never share
    position state:

        evens = Reiterable(lambda: (x for x in range(10) if x % 2 == 0))
        list(evens) == list(evens)  # True
    """

    __slots__ = ("_produce",)

    def __init__(self, produce: Producer[T], /) -> None:
        self._produce = produce

    def __iter__(self) -> Iterator[T]:
        return iter(self._produce())

    def __repr__(self) -> str:
        name = getattr(self._produce, "__qualname__", type(self._produce).__name__)
        return f"Reiterable({name})"


class AsyncReiterable[T]:
    """Restartable async iterable over an async production entry point."""

    __slots__ = ("_produce",)

    def __init__(self, produce: AsyncProducer[T], /) -> None:
        self._produce = produce

    def __aiter__(self) -> AsyncIterator[T]:
        return aiter(self._produce())

    def __repr__(self) -> str:
        name = getattr(self._produce, "__qualname__", type(self._produce).__name__)
        return f"AsyncReiterable({name})"


def is_iterable(value: object) -> typing.TypeGuard[Iterable[typing.Any]]:
    """Sequence check of the iterable variant."""
    return isinstance(value, Iterable) and not isinstance(value, _SCALARS)


def is_producer(value: object) -> typing.TypeGuard[Producer[typing.Any]]:
    """Sequence check of the generator variant."""
    return inspect.isgeneratorfunction(value)


def is_async_iterable(value: object) -> typing.TypeGuard[AsyncIterable[typing.Any]]:
    """Sequence check of the async variant."""
    return isinstance(value, AsyncIterable)


__all__ = (
    "Reiterable",
    "AsyncReiterable",
    "is_iterable",
    "is_producer",
    "is_async_iterable",
)
