"""
Map combinators
===============

map (1:1) and chain (depth-first flat-map) with cursor + wrap pattern.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import identity, pull, resolve
from .._types import MaybeAwaitable, Opener, Producer, Wrap
from ..construct import from_async
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer


# ============================================================================
# Generic combinators (cursor + wrap pattern)
# ============================================================================


def mapM[S, A, B, R](
    source: S,
    callback: Callable[[A], B],
    *,
    cursor: Opener[S, A],
    wrap: Wrap[B, R],
) -> R:
    """Generic map combinator."""

    def produce() -> Iterator[B]:
        for value in cursor(source):
            yield callback(value)

    return wrap(produce)


def chainM[S, A, B, R](
    source: S,
    callback: Callable[[A], typing.Any],
    *,
    cursor: Opener[S, A],
    inner: Opener[typing.Any, B],
    wrap: Wrap[B, R],
) -> R:
    """
    Generic chain combinator.

    Drains the sequence produced for one value before pulling the next.
    """

    def produce() -> Iterator[B]:
        for value in cursor(source):
            yield from inner(callback(value))

    return wrap(produce)


# ============================================================================
# Sugar for iterables
# ============================================================================


@operator(is_sequence=is_iterable, required=1)
def map[A, B](source: Iterable[A], callback: Callable[[A], B]) -> Iterable[B]:
    """Apply callback to every value, lazily."""
    return mapM(source, callback, cursor=iter, wrap=Reiterable)


@operator(is_sequence=is_iterable, required=1)
def chain[A, B](source: Iterable[A], callback: Callable[[A], Iterable[B]]) -> Iterable[B]:
    """Flat-map: concatenate callback(value) for every value, in order."""
    return chainM(source, callback, cursor=iter, inner=iter, wrap=Reiterable)


# ============================================================================
# Sugar for generator functions
# ============================================================================


@operator(is_sequence=is_producer, required=1)
def map_gen[A, B](source: Producer[A], callback: Callable[[A], B]) -> Producer[B]:
    """Apply callback to every value, lazily."""
    return mapM(source, callback, cursor=pull, wrap=identity)


@operator(is_sequence=is_producer, required=1)
def chain_gen[A, B](source: Producer[A], callback: Callable[[A], Producer[B]]) -> Producer[B]:
    """Flat-map: callback must return a generator function."""
    return chainM(source, callback, cursor=pull, inner=pull, wrap=identity)


# ============================================================================
# Sugar for async iterables
# ============================================================================


@operator(is_sequence=is_async_iterable, required=1)
def map_async[A, B](
    source: AsyncIterable[A],
    callback: Callable[[A], MaybeAwaitable[B]],
) -> AsyncIterable[B]:
    """Apply callback to every value; awaitable results are awaited in pull order."""

    async def produce() -> AsyncIterator[B]:
        async for value in source:
            yield await resolve(callback(value))

    return AsyncReiterable(produce)


@operator(is_sequence=is_async_iterable, required=1)
def chain_async[A, B](
    source: AsyncIterable[A],
    callback: Callable[[A], MaybeAwaitable[AsyncIterable[B] | Iterable[B]]],
) -> AsyncIterable[B]:
    """Flat-map: callback may return an async or sync iterable, or an awaitable of one."""

    async def produce() -> AsyncIterator[B]:
        async for value in source:
            async for item in from_async(await resolve(callback(value))):
                yield item

    return AsyncReiterable(produce)


__all__ = ("map", "chain", "map_gen", "chain_gen", "map_async", "chain_async", "mapM", "chainM")
