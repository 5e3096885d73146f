from __future__ import annotations

import typing


class NotASequenceError(TypeError):
    """Value is neither a sequence, a cursor producer, nor a collection."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Cannot build a sequence from {type(value).__name__!r}")


class EmptySequenceError(LookupError):
    """Unseeded reduction over a sequence that produced no values."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() of empty sequence with no initial value")


__all__ = ("EmptySequenceError", "NotASequenceError")
