"""
Generator variant namespace.

Sequence = generator function (a restartable producer); every operator
returns a new generator function, calling it opens a fresh cursor.

    from lazyseq import generator as G

    def naturals():
        n = 0
        while True:
            yield n
            n += 1

    evens = G.pipe(naturals, G.filter(lambda n: n % 2 == 0), G.take(3))
    list(evens())  # [0, 2, 4]
"""

from __future__ import annotations

from .buffer import group_gen as group
from .buffer import sort_gen as sort
from .buffer import unique_gen as unique
from .buffer import unzip_gen as unzip
from .buffer import zip_gen as zip
from .construct import from_gen as from_
from .construct import of_gen as of
from .dispatch import Stage, compose, pipe
from .protocol import is_producer as is_sequence
from .terminal import all_gen as all
from .terminal import any_gen as any
from .terminal import collect_gen as collect
from .terminal import count_gen as count
from .terminal import find_gen as find
from .terminal import first_gen as first
from .terminal import fold_gen as fold
from .terminal import for_each_gen as for_each
from .terminal import is_empty_gen as is_empty
from .terminal import last_gen as last
from .transform import chain_gen as chain
from .transform import concat_gen as concat
from .transform import enumerate_gen as enumerate
from .transform import filter_gen as filter
from .transform import map_gen as map
from .transform import scan_gen as scan
from .transform import skip_gen as skip
from .transform import skip_while_gen as skip_while
from .transform import take_gen as take
from .transform import take_while_gen as take_while
from .transform import tap_gen as tap
from .writer import record_gen as record

__all__ = (
    # Protocol
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
