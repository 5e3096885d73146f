"""
Group / unique combinators
==========================

Key-based buffering:

- group: one full pass into an insertion-ordered key -> values table,
  then (key, sub_sequence) pairs in first-occurrence order. Finite sources only.
- unique: forwards the first value seen for each key. Memory grows with the
  number of distinct keys, so it copes with infinite sources of few keys.

Keys must be hashable.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import identity, pull, resolve
from .._types import MaybeAwaitable, Opener, Producer, Selector, Wrap
from ..construct import from_, from_async, from_gen
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer


# ============================================================================
# Generic combinators (cursor + wrap pattern)
# ============================================================================


def groupM[S, T, K, G, R](
    source: S,
    key: Selector[T, K],
    *,
    cursor: Opener[S, T],
    nest: Callable[[list[T]], G],
    wrap: Wrap[tuple[K, G], R],
) -> R:
    """
    Generic group combinator.

    nest turns one key's buffered values into a sub-sequence of the variant.
    """

    def produce() -> Iterator[tuple[K, G]]:
        groups: dict[K, list[T]] = {}
        for value in cursor(source):
            groups.setdefault(key(value), []).append(value)
        for group_key, values in groups.items():
            yield group_key, nest(values)

    return wrap(produce)


def uniqueM[S, T, K, R](
    source: S,
    key: Selector[T, K] = identity,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic unique combinator."""

    def produce() -> Iterator[T]:
        seen: set[K] = set()
        for value in cursor(source):
            marker = key(value)
            if marker in seen:
                continue
            seen.add(marker)
            yield value

    return wrap(produce)


# ============================================================================
# Sugar for iterables
# ============================================================================


@operator(is_sequence=is_iterable, required=1)
def group[T, K](source: Iterable[T], key: Selector[T, K]) -> Iterable[tuple[K, Iterable[T]]]:
    """(key, values) pairs in first-occurrence order."""
    return groupM(source, key, cursor=iter, nest=from_, wrap=Reiterable)


@operator(is_sequence=is_iterable, required=0, optional=1)
def unique[T, K](source: Iterable[T], key: Selector[T, K] = identity) -> Iterable[T]:
    """First value per key, in order."""
    return uniqueM(source, key, cursor=iter, wrap=Reiterable)


# ============================================================================
# Sugar for generator functions
# ============================================================================


@operator(is_sequence=is_producer, required=1)
def group_gen[T, K](source: Producer[T], key: Selector[T, K]) -> Producer[tuple[K, Producer[T]]]:
    """(key, values) pairs in first-occurrence order."""
    return groupM(source, key, cursor=pull, nest=from_gen, wrap=identity)


@operator(is_sequence=is_producer, required=0, optional=1)
def unique_gen[T, K](source: Producer[T], key: Selector[T, K] = identity) -> Producer[T]:
    """First value per key, in order."""
    return uniqueM(source, key, cursor=pull, wrap=identity)


# ============================================================================
# Sugar for async iterables
# ============================================================================


@operator(is_sequence=is_async_iterable, required=1)
def group_async[T, K](
    source: AsyncIterable[T],
    key: Callable[[T], MaybeAwaitable[K]],
) -> AsyncIterable[tuple[K, AsyncIterable[T]]]:
    """(key, values) pairs in first-occurrence order; key may be async."""

    async def produce() -> AsyncIterator[tuple[K, AsyncIterable[T]]]:
        groups: dict[K, list[T]] = {}
        async for value in source:
            groups.setdefault(await resolve(key(value)), []).append(value)
        for group_key, values in groups.items():
            yield group_key, from_async(values)

    return AsyncReiterable(produce)


@operator(is_sequence=is_async_iterable, required=0, optional=1)
def unique_async[T, K](
    source: AsyncIterable[T],
    key: Callable[[T], MaybeAwaitable[K]] = identity,
) -> AsyncIterable[T]:
    """First value per key, in order; key may be async."""

    async def produce() -> AsyncIterator[T]:
        seen: set[typing.Any] = set()
        async for value in source:
            marker = await resolve(key(value))
            if marker in seen:
                continue
            seen.add(marker)
            yield value

    return AsyncReiterable(produce)


__all__ = (
    "group",
    "unique",
    "group_gen",
    "unique_gen",
    "group_async",
    "unique_async",
    "groupM",
    "uniqueM",
)
