"""
Scan combinators
================

Running fold: yields the accumulator after every source value.

    scan(of(1, 2, 3), 0, add)  # 1, 3, 6
    scan(of(1, 2, 3), add)     # 1, 3, 6 (first value seeds, yielded as is)

Unseeded scan over an empty source yields nothing.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import MISSING, identity, pull, resolve, unseeded
from .._types import MaybeAwaitable, Opener, Producer, Reducer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer


# ============================================================================
# Generic combinator (cursor + wrap pattern)
# ============================================================================


def scanM[S, T, A, R](
    source: S,
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[A, R],
) -> R:
    """Generic scan combinator."""
    seed, step = unseeded(accumulator, reducer)

    def produce() -> Iterator[A]:
        values = cursor(source)
        intermediate = seed
        if intermediate is MISSING:
            intermediate = next(values, MISSING)
            if intermediate is MISSING:
                return
            yield intermediate
        for value in values:
            intermediate = step(intermediate, value)
            yield intermediate

    return wrap(produce)


# ============================================================================
# Sugar for iterables
# ============================================================================


@operator(is_sequence=is_iterable, required=1, optional=1)
def scan[T, A](
    source: Iterable[T],
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
) -> Iterable[A]:
    """Running accumulator after each value."""
    return scanM(source, accumulator, reducer, cursor=iter, wrap=Reiterable)


# ============================================================================
# Sugar for generator functions
# ============================================================================


@operator(is_sequence=is_producer, required=1, optional=1)
def scan_gen[T, A](
    source: Producer[T],
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
) -> Producer[A]:
    """Running accumulator after each value."""
    return scanM(source, accumulator, reducer, cursor=pull, wrap=identity)


# ============================================================================
# Sugar for async iterables
# ============================================================================


@operator(is_sequence=is_async_iterable, required=1, optional=1)
def scan_async[T, A](
    source: AsyncIterable[T],
    accumulator: A | Callable[[A, T], MaybeAwaitable[A]],
    reducer: Callable[[A, T], MaybeAwaitable[A]] | typing.Any = MISSING,
) -> AsyncIterable[A]:
    """Running accumulator after each value; the reducer may be async."""
    seed, step = unseeded(accumulator, reducer)

    async def produce() -> AsyncIterator[A]:
        values = aiter(source)
        intermediate = seed
        if intermediate is MISSING:
            intermediate = await anext(values, MISSING)
            if intermediate is MISSING:
                return
            yield intermediate
        async for value in values:
            intermediate = await resolve(step(intermediate, value))
            yield intermediate

    return AsyncReiterable(produce)


__all__ = ("scan", "scan_gen", "scan_async", "scanM")
