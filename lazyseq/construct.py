"""
Construction
============

of / from_ for every variant. All of them normalize their input into the
canonical restartable form:

- already a sequence of the variant: returned as is
- cursor-producing function: adopted as the production entry point
- finite collection: snapshotted now, replayed on every traversal
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterable, AsyncIterator, Callable, Collection, Iterable, Iterator

from ._errors import NotASequenceError
from ._types import AsyncProducer, Producer
from .protocol import AsyncReiterable, Reiterable, is_async_iterable, is_producer


def _snapshot(value: typing.Any) -> tuple[typing.Any, ...]:
    """Freeze a finite collection into a tuple, shape errors become NotASequenceError."""
    if isinstance(value, tuple):
        return value
    try:
        return tuple(value)
    except TypeError as exc:
        raise NotASequenceError(value) from exc


def _replay[T](values: tuple[T, ...]) -> Producer[T]:
    def produce() -> Iterator[T]:
        yield from values

    return produce


# ============================================================================
# Iterable variant
# ============================================================================


def from_[T](value: Iterable[T] | Producer[T] | Collection[T]) -> Iterable[T]:
    """
    Normalize value into a restartable iterable.

    Lists, tuples, sets, dicts and strings are snapshotted, so later
    mutation of the original is not observed. Iterators and custom
    iterables are returned unchanged (an iterator stays single-use).
    """
    if isinstance(value, Reiterable):
        return value
    if isinstance(value, Collection):
        return Reiterable(_replay(_snapshot(value)))
    if isinstance(value, Iterable):
        return value
    if callable(value):
        return Reiterable(typing.cast(Producer[T], value))
    return Reiterable(_replay(_snapshot(value)))


def of[T](*values: T) -> Iterable[T]:
    """Restartable iterable of exactly these values."""
    return Reiterable(_replay(values))


# ============================================================================
# Generator variant
# ============================================================================


def from_gen[T](value: Producer[T] | Callable[[], Iterable[T]] | Iterable[T]) -> Producer[T]:
    """
    Normalize value into a generator function.

    Collections are snapshotted. Plain cursor-producing callables and other
    iterables are adopted behind a generator function, so a Reiterable
    stays lazy and restartable.
    """
    if is_producer(value):
        return value
    if isinstance(value, Collection):
        return _replay(_snapshot(value))
    if isinstance(value, Iterable):
        iterable = value

        def adopt() -> Iterator[T]:
            yield from iterable

        return adopt
    if callable(value):
        factory = typing.cast(Callable[[], Iterable[T]], value)

        def produce() -> Iterator[T]:
            yield from factory()

        return produce
    return _replay(_snapshot(value))


def of_gen[T](*values: T) -> Producer[T]:
    """Generator function yielding exactly these values."""
    return _replay(values)


# ============================================================================
# Async variant
# ============================================================================


def _replay_async[T](values: tuple[T, ...]) -> AsyncProducer[T]:
    async def produce() -> AsyncIterator[T]:
        for value in values:
            yield value

    return produce


def from_async[T](value: AsyncIterable[T] | AsyncProducer[T] | Iterable[T]) -> AsyncIterable[T]:
    """
    Normalize value into a restartable async iterable.

    Sync collections are snapshotted now, other sync iterables are
    replayed lazily through their own iter().
    """
    if is_async_iterable(value):
        return value
    if isinstance(value, Collection):
        return AsyncReiterable(_replay_async(_snapshot(value)))
    if isinstance(value, Iterable):
        iterable = value

        async def adopt() -> AsyncIterator[T]:
            for item in iterable:
                yield item

        return AsyncReiterable(adopt)
    if callable(value):
        return AsyncReiterable(typing.cast(AsyncProducer[T], value))
    return AsyncReiterable(_replay_async(_snapshot(value)))


def of_async[T](*values: T) -> AsyncIterable[T]:
    """Restartable async iterable of exactly these values."""
    return AsyncReiterable(_replay_async(values))


__all__ = (
    "from_",
    "of",
    "from_gen",
    "of_gen",
    "from_async",
    "of_async",
)
