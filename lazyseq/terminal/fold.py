"""
Fold combinators
================

Strict left fold and the terminals built on it: count, last, for_each, collect.
Each opens exactly one fresh cursor.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from .._errors import EmptySequenceError
from .._helpers import MISSING, pull, resolve, unseeded
from .._types import MaybeAwaitable, Opener, Producer, Reducer
from ..dispatch import operator
from ..protocol import is_async_iterable, is_iterable, is_producer


# ============================================================================
# Generic combinators (cursor pattern)
# ============================================================================


def foldM[S, T, A](
    source: S,
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
    *,
    cursor: Opener[S, T],
) -> A:
    """
    Generic fold combinator.

    Unseeded form takes the first value as the seed and raises
    EmptySequenceError when there is none.
    """
    seed, step = unseeded(accumulator, reducer)
    values = cursor(source)

    if seed is MISSING:
        seed = next(values, MISSING)
        if seed is MISSING:
            raise EmptySequenceError("fold")

    result = seed
    for value in values:
        result = step(result, value)
    return result


def lastM[S, T](source: S, *, cursor: Opener[S, T]) -> Option[T]:
    """Generic last combinator. Always drains the cursor."""
    return foldM(source, Nothing(), lambda _, value: Some(value), cursor=cursor)


def countM[S, T](source: S, *, cursor: Opener[S, T]) -> int:
    """Generic count combinator."""
    return foldM(source, 0, lambda amount, _: amount + 1, cursor=cursor)


def for_eachM[S, T](source: S, callback: Callable[[T], typing.Any], *, cursor: Opener[S, T]) -> None:
    """Generic for_each combinator."""
    for value in cursor(source):
        callback(value)


def collectM[S, T, C](source: S, collector: Callable[[Iterator[T]], C], *, cursor: Opener[S, T]) -> C:
    """Generic collect combinator: hand the fresh cursor to collector."""
    return collector(cursor(source))


# ============================================================================
# Sugar for iterables
# ============================================================================


@operator(is_sequence=is_iterable, required=1, optional=1)
def fold[T, A](
    source: Iterable[T],
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
) -> A:
    """Strict left fold."""
    return foldM(source, accumulator, reducer, cursor=iter)


@operator(is_sequence=is_iterable, required=0)
def count[T](source: Iterable[T]) -> int:
    """Number of values."""
    return countM(source, cursor=iter)


@operator(is_sequence=is_iterable, required=0)
def last[T](source: Iterable[T]) -> Option[T]:
    """Final value, Nothing() for an empty source."""
    return lastM(source, cursor=iter)


@operator(is_sequence=is_iterable, required=1)
def for_each[T](source: Iterable[T], callback: Callable[[T], typing.Any]) -> None:
    """Call callback on every value, in order."""
    for_eachM(source, callback, cursor=iter)


@operator(is_sequence=is_iterable, required=1)
def collect[T, C](source: Iterable[T], collector: Callable[[Iterator[T]], C]) -> C:
    """collector(cursor): collect(source, list), collect(pairs, dict)."""
    return collectM(source, collector, cursor=iter)


# ============================================================================
# Sugar for generator functions
# ============================================================================


@operator(is_sequence=is_producer, required=1, optional=1)
def fold_gen[T, A](
    source: Producer[T],
    accumulator: A | Reducer[A, T],
    reducer: Reducer[A, T] | typing.Any = MISSING,
) -> A:
    """Strict left fold."""
    return foldM(source, accumulator, reducer, cursor=pull)


@operator(is_sequence=is_producer, required=0)
def count_gen[T](source: Producer[T]) -> int:
    """Number of values."""
    return countM(source, cursor=pull)


@operator(is_sequence=is_producer, required=0)
def last_gen[T](source: Producer[T]) -> Option[T]:
    """Final value, Nothing() for an empty source."""
    return lastM(source, cursor=pull)


@operator(is_sequence=is_producer, required=1)
def for_each_gen[T](source: Producer[T], callback: Callable[[T], typing.Any]) -> None:
    """Call callback on every value, in order."""
    for_eachM(source, callback, cursor=pull)


@operator(is_sequence=is_producer, required=1)
def collect_gen[T, C](source: Producer[T], collector: Callable[[Iterator[T]], C]) -> C:
    """collector(cursor)."""
    return collectM(source, collector, cursor=pull)


# ============================================================================
# Sugar for async iterables
# ============================================================================


@operator(is_sequence=is_async_iterable, required=1, optional=1)
async def fold_async[T, A](
    source: AsyncIterable[T],
    accumulator: A | Callable[[A, T], MaybeAwaitable[A]],
    reducer: Callable[[A, T], MaybeAwaitable[A]] | typing.Any = MISSING,
) -> A:
    """Strict left fold; the reducer may be async."""
    seed, step = unseeded(accumulator, reducer)
    values = aiter(source)

    if seed is MISSING:
        seed = await anext(values, MISSING)
        if seed is MISSING:
            raise EmptySequenceError("fold")

    result = seed
    async for value in values:
        result = await resolve(step(result, value))
    return result


@operator(is_sequence=is_async_iterable, required=0)
async def count_async[T](source: AsyncIterable[T]) -> int:
    """Number of values."""
    return await fold_async(source, 0, lambda amount, _: amount + 1)


@operator(is_sequence=is_async_iterable, required=0)
async def last_async[T](source: AsyncIterable[T]) -> Option[T]:
    """Final value, Nothing() for an empty source."""
    return await fold_async(source, Nothing(), lambda _, value: Some(value))


@operator(is_sequence=is_async_iterable, required=1)
async def for_each_async[T](
    source: AsyncIterable[T],
    callback: Callable[[T], MaybeAwaitable[typing.Any]],
) -> None:
    """Call (possibly async) callback on every value, one at a time, in order."""
    async for value in source:
        await resolve(callback(value))


@operator(is_sequence=is_async_iterable, required=1)
async def collect_async[T, C](source: AsyncIterable[T], collector: Callable[[Iterator[T]], C]) -> C:
    """Drain into a list, then collector(iter(list))."""
    return collector(iter([value async for value in source]))


__all__ = (
    # Iterable
    "fold",
    "count",
    "last",
    "for_each",
    "collect",
    # Generator
    "fold_gen",
    "count_gen",
    "last_gen",
    "for_each_gen",
    "collect_gen",
    # Async
    "fold_async",
    "count_async",
    "last_async",
    "for_each_async",
    "collect_async",
    # Generic
    "foldM",
    "countM",
    "lastM",
    "for_eachM",
    "collectM",
)
