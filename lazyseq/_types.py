"""
Core type definitions for lazyseq.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator

# ============================================================================
# Callback aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key (group, unique)
type Selector[T, K] = Callable[[T], K]

# Reducer = fold/scan step
type Reducer[A, T] = Callable[[A, T], A]

# Compare = three-way comparator: negative, zero or positive
type Compare[T] = Callable[[T, T], int]

# Async callbacks may answer with a plain value or with an awaitable of it
type MaybeAwaitable[T] = T | Awaitable[T]

# ============================================================================
# Production entry points
# ============================================================================

# Producer = zero-arg function returning a fresh cursor
type Producer[T] = Callable[[], Iterator[T]]

# AsyncProducer = zero-arg function returning a fresh async cursor
type AsyncProducer[T] = Callable[[], AsyncIterator[T]]

# Cursor opener: sequence -> fresh cursor (iter for iterables, call for producers)
type Opener[S, T] = Callable[[S], Iterator[T]]

# Wrapper: generator function -> sequence of the variant
type Wrap[T, S] = Callable[[Producer[T]], S]

# NOTE: Any instead of a precise bound, the dispatch adapter erases signatures
type Operator = Callable[..., typing.Any]

__all__ = (
    "Predicate",
    "Selector",
    "Reducer",
    "Compare",
    "MaybeAwaitable",
    "Producer",
    "AsyncProducer",
    "Opener",
    "Wrap",
    "Operator",
)
