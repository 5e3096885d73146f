"""Zip / unzip combinators

zip pulls source first, then other, one step at a time, and stops at the
shorter side. unzip re-traverses its source once per projection, so the
source must be restartable for both halves to be drained."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator

from .._helpers import MISSING, identity, pull
from .._types import Opener, Producer, Wrap
from ..dispatch import operator
from ..protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer

# Generic combinators (cursor + wrap pattern)
def zipM[S, A, B, R](
    source: S,
    other: S,
    *,
    cursor: Opener[S, A],
    wrap: Wrap[tuple[A, B], R],
) -> R:
    """Generic zip combinator. No partial pairs."""

    def produce() -> Iterator[tuple[A, B]]:
        partners = cursor(other)
        for item in cursor(source):
            partner = next(partners, MISSING)
            if partner is MISSING:
                return
            yield item, partner

    return wrap(produce)

def unzipM[S, A, B, R](
    source: S,
    *,
    cursor: Opener[S, tuple[A, B]],
    wrap: Wrap[A, R] | Wrap[B, R],
) -> tuple[R, R]:
    """Generic unzip combinator. Each half opens its own cursor on source."""

    def firsts() -> Iterator[A]:
        for first, _ in cursor(source):
            yield first

    def seconds() -> Iterator[B]:
        for _, second in cursor(source):
            yield second

    return wrap(firsts), wrap(seconds)

# Sugar for iterables
@operator(is_sequence=is_iterable, required=1, sequence_params=True)
def zip[A, B](source: Iterable[A], other: Iterable[B]) -> Iterable[tuple[A, B]]:
    """Pairs, truncated to the shorter source."""
    return zipM(source, other, cursor=iter, wrap=Reiterable)

@operator(is_sequence=is_iterable, required=0)
def unzip[A, B](source: Iterable[tuple[A, B]]) -> tuple[Iterable[A], Iterable[B]]:
    """(firsts, seconds), each re-traversing source."""
    return unzipM(source, cursor=iter, wrap=Reiterable)

# Sugar for generator functions
@operator(is_sequence=is_producer, required=1, sequence_params=True)
def zip_gen[A, B](source: Producer[A], other: Producer[B]) -> Producer[tuple[A, B]]:
    """Pairs, truncated to the shorter source."""
    return zipM(source, other, cursor=pull, wrap=identity)

@operator(is_sequence=is_producer, required=0)
def unzip_gen[A, B](source: Producer[tuple[A, B]]) -> tuple[Producer[A], Producer[B]]:
    """(firsts, seconds), each re-traversing source."""
    return unzipM(source, cursor=pull, wrap=identity)

# Sugar for async iterables
@operator(is_sequence=is_async_iterable, required=1, sequence_params=True)
def zip_async[A, B](source: AsyncIterable[A], other: AsyncIterable[B]) -> AsyncIterable[tuple[A, B]]:
    """Pairs, truncated to the shorter source. The two pulls never overlap."""

    async def produce() -> AsyncIterator[tuple[A, B]]:
        partners = aiter(other)
        async for item in source:
            partner = await anext(partners, MISSING)
            if partner is MISSING:
                return
            yield item, partner

    return AsyncReiterable(produce)

@operator(is_sequence=is_async_iterable, required=0)
def unzip_async[A, B](source: AsyncIterable[tuple[A, B]]) -> tuple[AsyncIterable[A], AsyncIterable[B]]:
    """(firsts, seconds), each re-traversing source."""

    async def firsts() -> AsyncIterator[A]:
        async for first, _ in source:
            yield first

    async def seconds() -> AsyncIterator[B]:
        async for _, second in source:
            yield second

    return AsyncReiterable(firsts), AsyncReiterable(seconds)

__all__ = (
    "zip",
    "unzip",
    "zip_gen",
    "unzip_gen",
    "zip_async",
    "unzip_async",
    "zipM",
    "unzipM",
)
