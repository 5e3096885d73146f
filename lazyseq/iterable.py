"""
Iterable variant namespace.

Sequence = any non-string Iterable; operators return restartable Reiterable.

    from lazyseq import iterable as S

    S.pipe(S.of(3, 1, 2), S.sort(), S.map(str), S.collect(list))  # ["1", "2", "3"]
"""

from __future__ import annotations

from .buffer import group, sort, unique, unzip, zip
from .construct import from_, of
from .dispatch import Stage, compose, pipe
from .protocol import Reiterable
from .protocol import is_iterable as is_sequence
from .terminal import all, any, collect, count, find, first, fold, for_each, is_empty, last
from .transform import (
    chain,
    concat,
    enumerate,
    filter,
    map,
    scan,
    skip,
    skip_while,
    take,
    take_while,
    tap,
)
from .writer import record

__all__ = (
    # Protocol
    "Reiterable",
    "Stage",
    "is_sequence",
    "compose",
    "pipe",
    # Construction
    "from_",
    "of",
    # Transform
    "chain",
    "concat",
    "enumerate",
    "filter",
    "map",
    "scan",
    "skip",
    "skip_while",
    "take",
    "take_while",
    "tap",
    # Terminal
    "all",
    "any",
    "collect",
    "count",
    "find",
    "first",
    "fold",
    "for_each",
    "is_empty",
    "last",
    # Buffer
    "group",
    "sort",
    "unique",
    "unzip",
    "zip",
    # Writer
    "record",
)
