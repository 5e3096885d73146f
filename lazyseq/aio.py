"""
Async variant namespace.

Sequence = any AsyncIterable; operators return restartable AsyncReiterable,
terminals are coroutines. Callbacks may be sync or async.

    from lazyseq import aio as A

    async def main():
        names = A.map(A.of(1, 2, 3), fetch_name)  # fetch_name is async
        return await A.collect(names, list)
"""

from __future__ import annotations

from .buffer import group_async as group
from .buffer import sort_async as sort
from .buffer import unique_async as unique
from .buffer import unzip_async as unzip
from .buffer import zip_async as zip
from .construct import from_async as from_
from .construct import of_async as of
from .dispatch import Stage, compose, pipe
from .protocol import AsyncReiterable
from .protocol import is_async_iterable as is_sequence
from .terminal import all_async as all
from .terminal import any_async as any
from .terminal import collect_async as collect
from .terminal import count_async as count
from .terminal import find_async as find
from .terminal import first_async as first
from .terminal import fold_async as fold
from .terminal import for_each_async as for_each
from .terminal import is_empty_async as is_empty
from .terminal import last_async as last
from .transform import chain_async as chain
from .transform import concat_async as concat
from .transform import enumerate_async as enumerate
from .transform import filter_async as filter
from .transform import map_async as map
from .transform import scan_async as scan
from .transform import skip_async as skip
from .transform import skip_while_async as skip_while
from .transform import take_async as take
from .transform import take_while_async as take_while
from .transform import tap_async as tap
from .writer import record_async as record

__all__ = (
    # Protocol
    "AsyncReiterable",
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
