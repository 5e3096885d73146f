"""Record combinators

Write every pulled value into a Log at the moment it is pulled.
Nothing is written for values the consumer never asks for."""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from .._helpers import identity, pull
from .._types import Opener, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer
from .log import Entry, Log


def _entry(label: str | None, value: typing.Any) -> typing.Any:
    return value if label is None else Entry(label, value)

# Generic combinator (cursor + wrap pattern)
def recordM[S, T, R](
    source: S,
    log: Log[typing.Any],
    *,
    label: str | None = None,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic record combinator. Entries are Entry(label, value) when label is given."""

    def produce() -> Iterator[T]:
        for value in cursor(source):
            log.append(_entry(label, value))
            yield value

    return wrap(produce)

# Sugar
@operator(is_sequence=is_iterable, required=1, sequence_params=True)
def record[T](source: Iterable[T], log: Log[typing.Any], *, label: str | None = None) -> Iterable[T]:
    """Append each pulled value to log, pass it through unchanged."""
    return recordM(source, log, label=label, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_producer, required=1)
def record_gen[T](source: Producer[T], log: Log[typing.Any], *, label: str | None = None) -> Producer[T]:
    """Append each pulled value to log, pass it through unchanged."""
    return recordM(source, log, label=label, cursor=pull, wrap=identity)

@operator(is_sequence=is_async_iterable, required=1)
def record_async[T](
    source: AsyncIterable[T],
    log: Log[typing.Any],
    *,
    label: str | None = None,
) -> AsyncIterable[T]:
    """Append each pulled value to log, pass it through unchanged."""

    async def produce() -> AsyncIterator[T]:
        async for value in source:
            log.append(_entry(label, value))
            yield value

    return AsyncReiterable(produce)

__all__ = ("record", "record_gen", "record_async", "recordM")
