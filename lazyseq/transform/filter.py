"""Filter combinators

filter, take/take_while and skip/skip_while with cursor + wrap pattern.
All counters and flags live inside the generator body, so each cursor
starts from scratch."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import identity, pull, resolve
from .._types import MaybeAwaitable, Opener, Predicate, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer

# Generic combinators (cursor + wrap pattern)
def filterM[S, T, R](
    source: S,
    predicate: Predicate[T],
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic filter combinator."""

    def produce() -> Iterator[T]:
        for value in cursor(source):
            if predicate(value):
                yield value

    return wrap(produce)

def take_whileM[S, T, R](
    source: S,
    predicate: Predicate[T],
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """
    Generic take_while combinator.

    The first failing value is consumed from the source but never yielded.
    """

    def produce() -> Iterator[T]:
        for value in cursor(source):
            if not predicate(value):
                return
            yield value

    return wrap(produce)

def skip_whileM[S, T, R](
    source: S,
    predicate: Predicate[T],
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic skip_while combinator. predicate is not called after it first fails."""

    def produce() -> Iterator[T]:
        skipping = True
        for value in cursor(source):
            if skipping and predicate(value):
                continue
            skipping = False
            yield value

    return wrap(produce)

def takeM[S, T, R](
    source: S,
    amount: int,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """
    Generic take combinator.

    Returns right after the amount-th value, never probing for the next one.
    amount <= 0 does not even open the source cursor.
    """

    def produce() -> Iterator[T]:
        if amount <= 0:
            return
        remaining = amount
        for value in cursor(source):
            yield value
            remaining -= 1
            if remaining <= 0:
                return

    return wrap(produce)

def skipM[S, T, R](
    source: S,
    amount: int,
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic skip combinator."""

    def produce() -> Iterator[T]:
        remaining = amount
        for value in cursor(source):
            if remaining > 0:
                remaining -= 1
                continue
            yield value

    return wrap(produce)

# Sugar for iterables
@operator(is_sequence=is_iterable, required=1)
def filter[T](source: Iterable[T], predicate: Predicate[T]) -> Iterable[T]:
    """Keep values matching predicate, in order."""
    return filterM(source, predicate, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=1)
def take_while[T](source: Iterable[T], predicate: Predicate[T]) -> Iterable[T]:
    """Yield values while predicate holds."""
    return take_whileM(source, predicate, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=1)
def skip_while[T](source: Iterable[T], predicate: Predicate[T]) -> Iterable[T]:
    """Drop the leading run matching predicate."""
    return skip_whileM(source, predicate, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=1)
def take[T](source: Iterable[T], amount: int) -> Iterable[T]:
    """At most amount values."""
    return takeM(source, amount, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=1)
def skip[T](source: Iterable[T], amount: int) -> Iterable[T]:
    """Everything after the first amount values."""
    return skipM(source, amount, cursor=iter, wrap=Reiterable)

# Sugar for generator functions
@operator(is_sequence=is_producer, required=1)
def filter_gen[T](source: Producer[T], predicate: Predicate[T]) -> Producer[T]:
    """Keep values matching predicate, in order."""
    return filterM(source, predicate, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=1)
def take_while_gen[T](source: Producer[T], predicate: Predicate[T]) -> Producer[T]:
    """Yield values while predicate holds."""
    return take_whileM(source, predicate, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=1)
def skip_while_gen[T](source: Producer[T], predicate: Predicate[T]) -> Producer[T]:
    """Drop the leading run matching predicate."""
    return skip_whileM(source, predicate, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=1)
def take_gen[T](source: Producer[T], amount: int) -> Producer[T]:
    """At most amount values."""
    return takeM(source, amount, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=1)
def skip_gen[T](source: Producer[T], amount: int) -> Producer[T]:
    """Everything after the first amount values."""
    return skipM(source, amount, cursor=pull, wrap=identity)

# Sugar for async iterables
@operator(is_sequence=is_async_iterable, required=1)
def filter_async[T](
    source: AsyncIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterable[T]:
    """Keep values matching predicate, in order."""

    async def produce() -> AsyncIterator[T]:
        async for value in source:
            if await resolve(predicate(value)):
                yield value

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=1)
def take_while_async[T](
    source: AsyncIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterable[T]:
    """Yield values while predicate holds."""

    async def produce() -> AsyncIterator[T]:
        async for value in source:
            if not await resolve(predicate(value)):
                return
            yield value

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=1)
def skip_while_async[T](
    source: AsyncIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> AsyncIterable[T]:
    """Drop the leading run matching predicate."""

    async def produce() -> AsyncIterator[T]:
        skipping = True
        async for value in source:
            if skipping and await resolve(predicate(value)):
                continue
            skipping = False
            yield value

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=1)
def take_async[T](source: AsyncIterable[T], amount: int) -> AsyncIterable[T]:
    """At most amount values."""

    async def produce() -> AsyncIterator[T]:
        if amount <= 0:
            return
        remaining = amount
        async for value in source:
            yield value
            remaining -= 1
            if remaining <= 0:
                return

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=1)
def skip_async[T](source: AsyncIterable[T], amount: int) -> AsyncIterable[T]:
    """Everything after the first amount values."""

    async def produce() -> AsyncIterator[T]:
        remaining = amount
        async for value in source:
            if remaining > 0:
                remaining -= 1
                continue
            yield value

    return AsyncReiterable(produce)

__all__ = (
    # Iterable
    "filter",
    "take_while",
    "skip_while",
    "take",
    "skip",
    # Generator
    "filter_gen",
    "take_while_gen",
    "skip_while_gen",
    "take_gen",
    "skip_gen",
    # Async
    "filter_async",
    "take_while_async",
    "skip_while_async",
    "take_async",
    "skip_async",
    # Generic
    "filterM",
    "take_whileM",
    "skip_whileM",
    "takeM",
    "skipM",
)
