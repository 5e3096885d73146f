"""Lookup combinators

Short-circuiting terminals: first, is_empty, all, any, find.
They stop pulling as soon as the answer is known."""

from __future__ import annotations

from collections.abc import AsyncIterable, Callable, Iterable

from kungfu import Nothing, Option, Some

from .._helpers import MISSING, pull, resolve
from .._types import MaybeAwaitable, Opener, Predicate, Producer
from ..dispatch import operator
from ..protocol import is_async_iterable, is_iterable, is_producer

# Generic combinators (cursor pattern)
def firstM[S, T](source: S, *, cursor: Opener[S, T]) -> Option[T]:
    """Generic first combinator. Pulls exactly one value."""
    value = next(cursor(source), MISSING)
    if value is MISSING:
        return Nothing()
    return Some(value)

def is_emptyM[S, T](source: S, *, cursor: Opener[S, T]) -> bool:
    """Generic is_empty combinator. Pulls exactly one value and drops it."""
    return next(cursor(source), MISSING) is MISSING

def allM[S, T](source: S, predicate: Predicate[T], *, cursor: Opener[S, T]) -> bool:
    """Generic all combinator. False on the first failing value."""
    for value in cursor(source):
        if not predicate(value):
            return False
    return True

def anyM[S, T](source: S, predicate: Predicate[T], *, cursor: Opener[S, T]) -> bool:
    """Generic any combinator. True on the first passing value."""
    for value in cursor(source):
        if predicate(value):
            return True
    return False

def findM[S, T](source: S, predicate: Predicate[T], *, cursor: Opener[S, T]) -> Option[T]:
    """Generic find combinator."""
    for value in cursor(source):
        if predicate(value):
            return Some(value)
    return Nothing()

# Sugar for iterables
@operator(is_sequence=is_iterable, required=0)
def first[T](source: Iterable[T]) -> Option[T]:
    """First value, Nothing() for an empty source."""
    return firstM(source, cursor=iter)

@operator(is_sequence=is_iterable, required=0)
def is_empty[T](source: Iterable[T]) -> bool:
    return is_emptyM(source, cursor=iter)

@operator(is_sequence=is_iterable, required=1)
def all[T](source: Iterable[T], predicate: Predicate[T]) -> bool:
    return allM(source, predicate, cursor=iter)

@operator(is_sequence=is_iterable, required=1)
def any[T](source: Iterable[T], predicate: Predicate[T]) -> bool:
    return anyM(source, predicate, cursor=iter)

@operator(is_sequence=is_iterable, required=1)
def find[T](source: Iterable[T], predicate: Predicate[T]) -> Option[T]:
    """First matching value, Nothing() if none matches."""
    return findM(source, predicate, cursor=iter)

# Sugar for generator functions
@operator(is_sequence=is_producer, required=0)
def first_gen[T](source: Producer[T]) -> Option[T]:
    """First value, Nothing() for an empty source."""
    return firstM(source, cursor=pull)

@operator(is_sequence=is_producer, required=0)
def is_empty_gen[T](source: Producer[T]) -> bool:
    return is_emptyM(source, cursor=pull)

@operator(is_sequence=is_producer, required=1)
def all_gen[T](source: Producer[T], predicate: Predicate[T]) -> bool:
    return allM(source, predicate, cursor=pull)

@operator(is_sequence=is_producer, required=1)
def any_gen[T](source: Producer[T], predicate: Predicate[T]) -> bool:
    return anyM(source, predicate, cursor=pull)

@operator(is_sequence=is_producer, required=1)
def find_gen[T](source: Producer[T], predicate: Predicate[T]) -> Option[T]:
    """First matching value, Nothing() if none matches."""
    return findM(source, predicate, cursor=pull)

# Sugar for async iterables
@operator(is_sequence=is_async_iterable, required=0)
async def first_async[T](source: AsyncIterable[T]) -> Option[T]:
    """First value, Nothing() for an empty source."""
    value = await anext(aiter(source), MISSING)
    if value is MISSING:
        return Nothing()
    return Some(value)

@operator(is_sequence=is_async_iterable, required=0)
async def is_empty_async[T](source: AsyncIterable[T]) -> bool:
    return await anext(aiter(source), MISSING) is MISSING

@operator(is_sequence=is_async_iterable, required=1)
async def all_async[T](source: AsyncIterable[T], predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
    async for value in source:
        if not await resolve(predicate(value)):
            return False
    return True

@operator(is_sequence=is_async_iterable, required=1)
async def any_async[T](source: AsyncIterable[T], predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
    async for value in source:
        if await resolve(predicate(value)):
            return True
    return False

@operator(is_sequence=is_async_iterable, required=1)
async def find_async[T](
    source: AsyncIterable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
) -> Option[T]:
    """First matching value, Nothing() if none matches."""
    async for value in source:
        if await resolve(predicate(value)):
            return Some(value)
    return Nothing()

__all__ = (
    # Iterable
    "first",
    "is_empty",
    "all",
    "any",
    "find",
    # Generator
    "first_gen",
    "is_empty_gen",
    "all_gen",
    "any_gen",
    "find_gen",
    # Async
    "first_async",
    "is_empty_async",
    "all_async",
    "any_async",
    "find_async",
    # Generic
    "firstM",
    "is_emptyM",
    "allM",
    "anyM",
    "findM",
)
