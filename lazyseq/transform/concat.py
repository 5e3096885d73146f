"""Concat and enumerate combinators

Sequencing two sources and indexing one, with cursor + wrap pattern."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from .._helpers import identity, pull
from .._types import Opener, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer

# Generic combinators (cursor + wrap pattern)
def concatM[S, T, R](
    source: S,
    other: S,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic concat combinator. other is opened only once source is exhausted."""

    def produce() -> Iterator[T]:
        yield from cursor(source)
        yield from cursor(other)

    return wrap(produce)

def enumerateM[S, T, R](
    source: S,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[tuple[int, T], R],
) -> R:
    """Generic enumerate combinator."""

    def produce() -> Iterator[tuple[int, T]]:
        index = 0
        for value in cursor(source):
            yield index, value
            index += 1

    return wrap(produce)

# Sugar for iterables
@operator(is_sequence=is_iterable, required=1, sequence_params=True)
def concat[T](source: Iterable[T], other: Iterable[T]) -> Iterable[T]:
    """All of source, then all of other."""
    return concatM(source, other, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=0)
def enumerate[T](source: Iterable[T]) -> Iterable[tuple[int, T]]:
    """(index, value) pairs, zero-based."""
    return enumerateM(source, cursor=iter, wrap=Reiterable)

# Sugar for generator functions
@operator(is_sequence=is_producer, required=1, sequence_params=True)
def concat_gen[T](source: Producer[T], other: Producer[T]) -> Producer[T]:
    """All of source, then all of other."""
    return concatM(source, other, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=0)
def enumerate_gen[T](source: Producer[T]) -> Producer[tuple[int, T]]:
    """(index, value) pairs, zero-based."""
    return enumerateM(source, cursor=pull, wrap=identity)

# Sugar for async iterables
@operator(is_sequence=is_async_iterable, required=1, sequence_params=True)
def concat_async[T](source: AsyncIterable[T], other: AsyncIterable[T]) -> AsyncIterable[T]:
    """All of source, then all of other."""

    async def produce() -> AsyncIterator[T]:
        async for value in source:
            yield value
        async for value in other:
            yield value

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=0)
def enumerate_async[T](source: AsyncIterable[T]) -> AsyncIterable[tuple[int, T]]:
    """(index, value) pairs, zero-based."""

    async def produce() -> AsyncIterator[tuple[int, T]]:
        index = 0
        async for value in source:
            yield index, value
            index += 1

    return AsyncReiterable(produce)

__all__ = (
    "concat",
    "enumerate",
    "concat_gen",
    "enumerate_gen",
    "concat_async",
    "enumerate_async",
    "concatM",
    "enumerateM",
)
