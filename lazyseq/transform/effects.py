"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the values flowing through."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable, Iterable, Iterator

from .._helpers import identity, pull, resolve
from .._types import MaybeAwaitable, Opener, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer

# Generic combinator (cursor + wrap pattern)
def tapM[S, T, R](
    source: S,
    effect: Callable[[T], None],
    *,
    cursor: Opener[S, T],
    wrap: Wrap[T, R],
) -> R:
    """Generic tap combinator. effect runs when the value is pulled, not before."""

    def produce() -> Iterator[T]:
        for value in cursor(source):
            effect(value)
            yield value

    return wrap(produce)

# Sugar
@operator(is_sequence=is_iterable, required=1)
def tap[T](source: Iterable[T], effect: Callable[[T], None]) -> Iterable[T]:
    """Run effect on every pulled value, pass it through unchanged."""
    return tapM(source, effect, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_producer, required=1)
def tap_gen[T](source: Producer[T], effect: Callable[[T], None]) -> Producer[T]:
    """Run effect on every pulled value, pass it through unchanged."""
    return tapM(source, effect, cursor=pull, wrap=identity)

@operator(is_sequence=is_async_iterable, required=1)
def tap_async[T](
    source: AsyncIterable[T],
    effect: Callable[[T], MaybeAwaitable[None]],
) -> AsyncIterable[T]:
    """Run (possibly async) effect on every pulled value, pass it through unchanged."""

    async def produce() -> AsyncIterator[T]:
        async for value in source:
            await resolve(effect(value))
            yield value

    return AsyncReiterable(produce)

__all__ = ("tap", "tap_gen", "tap_async", "tapM")
