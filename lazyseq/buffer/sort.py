"""Sort combinators

Materializes the whole source on first pull, then replays the sorted buffer.
Finite sources only: an infinite source never yields."""

from __future__ import annotations

import functools
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from .._helpers import identity, pull
from .._types import Compare, Opener, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer


def _ordered[T](values: Iterable[T], compare: Compare[T] | None, reverse: bool) -> list[T]:
    # sorted() is stable, reverse=True keeps equal values in source order too
    if compare is None:
        return sorted(values, reverse=reverse)  # type: ignore[type-var]
    return sorted(values, key=functools.cmp_to_key(compare), reverse=reverse)

# Generic combinator (cursor + wrap pattern)
def sortM[S, T, R](
    source: S,
    compare: Compare[T] | None = None,
    *,
    reverse: bool = False,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """
    Generic sort combinator.

    compare is a three-way comparator (negative / zero / positive),
    natural ordering when omitted.
    """

    def produce() -> Iterator[T]:
        yield from _ordered(cursor(source), compare, reverse)

    return wrap(produce)

# Sugar
@operator(is_sequence=is_iterable, required=0, optional=1)
def sort[T](source: Iterable[T], compare: Compare[T] | None = None, *, reverse: bool = False) -> Iterable[T]:
    """Stable sort by three-way comparator."""
    return sortM(source, compare, reverse=reverse, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_producer, required=0, optional=1)
def sort_gen[T](source: Producer[T], compare: Compare[T] | None = None, *, reverse: bool = False) -> Producer[T]:
    """Stable sort by three-way comparator."""
    return sortM(source, compare, reverse=reverse, cursor=pull, wrap=identity)

@operator(is_sequence=is_async_iterable, required=0, optional=1)
def sort_async[T](
    source: AsyncIterable[T],
    compare: Compare[T] | None = None,
    *,
    reverse: bool = False,
) -> AsyncIterable[T]:
    """Stable sort by three-way comparator."""

    async def produce() -> AsyncIterator[T]:
        buffer = [value async for value in source]
        for value in _ordered(buffer, compare, reverse):
            yield value

    return AsyncReiterable(produce)

__all__ = ("sort", "sort_gen", "sort_async", "sortM")
