"""Internal helpers for lazyseq.

Common functions used across operator modules.
These are not part of the public API but can be used for writing custom operators."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Iterator

from ._types import MaybeAwaitable, Producer


class _Missing:
    """Marker type for an omitted optional parameter."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


# Sentinel: "parameter omitted" (None is a legitimate seed)
MISSING: typing.Final = _Missing()


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


# Openers (sequence -> fresh cursor)
def pull[T](producer: Producer[T]) -> Iterator[T]:
    """
    Open a cursor on a generator-variant sequence.
    
    The generator variant's sequence IS the production entry point,
    so opening a cursor is just calling it.
    """
    return producer()


def unseeded(accumulator: typing.Any, reducer: typing.Any) -> tuple[typing.Any, typing.Any]:
    """
    Normalize (seed, reducer) for fold/scan.
    
    Called as fold(source, reducer) the reducer lands in the seed slot:
        unseeded(f, MISSING)  # (MISSING, f)
        unseeded(0, f)        # (0, f)
    """
    if reducer is MISSING:
        return MISSING, accumulator
    return accumulator, reducer


# Async helpers
async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, return it unchanged otherwise."""
    if inspect.isawaitable(value):
        return await value
    return typing.cast(T, value)


__all__ = (
    "MISSING",
    "identity",
    "pull",
    "unseeded",
    "resolve",
)
