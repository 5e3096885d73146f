"""
Dispatch adapter
================

Every operator has two call shapes:

    map(source, f)      # apply now
    map(f)(source)      # Stage: apply later, composable into pipelines

One decorator implements both for every operator, so the shapes never drift
apart between operators or between variants.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._types import Operator


@dataclass(frozen=True, slots=True)
class Stage[S, R]:
    """
    Partially applied operator awaiting its source.

    Stages compose left to right:

        evens_doubled = filter(lambda x: x % 2 == 0) | map(lambda x: x * 2)
        list(evens_doubled(range(10)))  # [0, 4, 8, 12, 16]
    """

    name: str
    apply: Callable[[S], R]

    def __call__(self, source: S, /) -> R:
        return self.apply(source)

    def then[U](self, other: Callable[[R], U], /) -> Stage[S, U]:
        """Feed this stage's result into other."""
        name = getattr(other, "name", getattr(other, "__name__", repr(other)))

        def composed(source: S) -> U:
            return other(self.apply(source))

        return Stage(f"{self.name} | {name}", composed)

    def __or__[U](self, other: Callable[[R], U], /) -> Stage[S, U]:
        return self.then(other)

    def __repr__(self) -> str:
        return f"Stage({self.name})"


def operator(
    *,
    is_sequence: Callable[[object], bool],
    required: int,
    optional: int = 0,
    sequence_params: bool = False,
) -> Callable[[Operator], Operator]:
    """
    Give finish(source, *params, **options) both call shapes.

    - more than `required` positionals and the first one is a sequence:
      run finish now
    - a sequence followed by too few parameters: TypeError right away
    - between `required` and `required + optional` positionals: return a Stage
    - anything else: TypeError right away

    Operators whose first parameter is itself a sequence (concat, zip,
    record into a Log) pass sequence_params=True and are told apart by
    count alone: concat(a, b) runs, concat(b) is a stage.
    """

    def decorate(finish: Operator) -> Operator:
        name = finish.__name__

        @functools.wraps(finish)
        def dispatch(*args: typing.Any, **options: typing.Any) -> typing.Any:
            if args and is_sequence(args[0]):
                if len(args) > required + optional + 1:
                    raise TypeError(
                        f"{name}() takes at most {required + optional} parameters "
                        f"after the source ({len(args) - 1} given)"
                    )
                if len(args) > required:
                    return finish(*args, **options)
                if not sequence_params:
                    raise TypeError(f"{name}() missing parameters after the source")

            if not required <= len(args) <= required + optional:
                raise TypeError(
                    f"{name}() stage takes {required} to {required + optional} "
                    f"parameters ({len(args)} given)"
                )

            def apply(source: typing.Any) -> typing.Any:
                return finish(source, *args, **options)

            return Stage(name, apply)

        return dispatch

    return decorate


def pipe(source: typing.Any, /, *stages: Callable[[typing.Any], typing.Any]) -> typing.Any:
    """
    Thread source through stages left to right.

        pipe(range(10), filter(is_even), map(square), fold(0, add))
    """
    result = source
    for stage in stages:
        result = stage(result)
    return result


def compose(*stages: Callable[[typing.Any], typing.Any]) -> Stage[typing.Any, typing.Any]:
    """Build one Stage out of several, applied left to right."""
    if not stages:
        raise ValueError("compose() requires at least one stage")

    names = " | ".join(getattr(s, "name", getattr(s, "__name__", repr(s))) for s in stages)
    return Stage(names, lambda source: pipe(source, *stages))


__all__ = ("Stage", "operator", "pipe", "compose")
