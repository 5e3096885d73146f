"""
Lazy sequence combinators.

Composable, pull-driven operators (map, filter, fold, take, zip, group,
unique, sort, scan, ...) usable directly or as pipeline stages:

    fold(map(of(1, 2, 3), double), 0, add)          # apply now
    pipe(of(1, 2, 3), map(double), fold(0, add))    # stages

Architecture:
- Generic synchronous operators (*M functions) work with any cursor + wrap pair
- Sugar for iterables (no suffix), reexported by the `iterable` namespace
- Sugar for generator functions (*_gen suffix), `generator` namespace
- Async twins (*_async suffix), `aio` namespace
"""

# Core types
from ._types import Compare, Predicate, Producer, Reducer, Selector

# Internal helpers (for custom operators)
from . import _helpers
from ._helpers import MISSING

# Protocol
from .protocol import AsyncReiterable, Reiterable, is_async_iterable, is_iterable, is_producer

# Dispatch adapter
from .dispatch import Stage, compose, operator, pipe

# Variant namespaces
from . import aio, generator, iterable

# Construction
from .construct import from_, from_async, from_gen, of, of_async, of_gen

# Lazy transforms
from .transform import (
    # Iterable
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
    # Generator
    chain_gen,
    concat_gen,
    enumerate_gen,
    filter_gen,
    map_gen,
    scan_gen,
    skip_gen,
    skip_while_gen,
    take_gen,
    take_while_gen,
    tap_gen,
    # Async
    chain_async,
    concat_async,
    enumerate_async,
    filter_async,
    map_async,
    scan_async,
    skip_async,
    skip_while_async,
    take_async,
    take_while_async,
    tap_async,
    # Generic
    chainM,
    concatM,
    enumerateM,
    filterM,
    mapM,
    scanM,
    skipM,
    skip_whileM,
    takeM,
    take_whileM,
    tapM,
)

# Terminals
from .terminal import (
    # Iterable
    all,
    any,
    collect,
    count,
    find,
    first,
    fold,
    for_each,
    is_empty,
    last,
    # Generator
    all_gen,
    any_gen,
    collect_gen,
    count_gen,
    find_gen,
    first_gen,
    fold_gen,
    for_each_gen,
    is_empty_gen,
    last_gen,
    # Async
    all_async,
    any_async,
    collect_async,
    count_async,
    find_async,
    first_async,
    fold_async,
    for_each_async,
    is_empty_async,
    last_async,
    # Generic
    allM,
    anyM,
    collectM,
    countM,
    findM,
    firstM,
    foldM,
    for_eachM,
    is_emptyM,
    lastM,
)

# Buffering
from .buffer import (
    # Iterable
    group,
    sort,
    unique,
    unzip,
    zip,
    # Generator
    group_gen,
    sort_gen,
    unique_gen,
    unzip_gen,
    zip_gen,
    # Async
    group_async,
    sort_async,
    unique_async,
    unzip_async,
    zip_async,
    # Generic
    groupM,
    sortM,
    uniqueM,
    unzipM,
    zipM,
)

# Writer
from . import writer
from .writer import Entry, Log, record, record_async, record_gen, recordM

# Errors
from ._errors import EmptySequenceError, NotASequenceError

# is_sequence of the default (iterable) variant
is_sequence = is_iterable

__all__ = (
    # Types
    "Compare",
    "Predicate",
    "Producer",
    "Reducer",
    "Selector",
    # Internal helpers (for custom operators)
    "_helpers",
    "MISSING",
    # Protocol
    "AsyncReiterable",
    "Reiterable",
    "is_async_iterable",
    "is_iterable",
    "is_producer",
    "is_sequence",
    # Dispatch
    "Stage",
    "compose",
    "operator",
    "pipe",
    # Namespaces
    "aio",
    "generator",
    "iterable",
    "writer",
    # Construction
    "from_",
    "from_async",
    "from_gen",
    "of",
    "of_async",
    "of_gen",
    # Transform - Iterable
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
    # Transform - Generator
    "chain_gen",
    "concat_gen",
    "enumerate_gen",
    "filter_gen",
    "map_gen",
    "scan_gen",
    "skip_gen",
    "skip_while_gen",
    "take_gen",
    "take_while_gen",
    "tap_gen",
    # Transform - Async
    "chain_async",
    "concat_async",
    "enumerate_async",
    "filter_async",
    "map_async",
    "scan_async",
    "skip_async",
    "skip_while_async",
    "take_async",
    "take_while_async",
    "tap_async",
    # Transform - Generic
    "chainM",
    "concatM",
    "enumerateM",
    "filterM",
    "mapM",
    "scanM",
    "skipM",
    "skip_whileM",
    "takeM",
    "take_whileM",
    "tapM",
    # Terminal - Iterable
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
    # Terminal - Generator
    "all_gen",
    "any_gen",
    "collect_gen",
    "count_gen",
    "find_gen",
    "first_gen",
    "fold_gen",
    "for_each_gen",
    "is_empty_gen",
    "last_gen",
    # Terminal - Async
    "all_async",
    "any_async",
    "collect_async",
    "count_async",
    "find_async",
    "first_async",
    "fold_async",
    "for_each_async",
    "is_empty_async",
    "last_async",
    # Terminal - Generic
    "allM",
    "anyM",
    "collectM",
    "countM",
    "findM",
    "firstM",
    "foldM",
    "for_eachM",
    "is_emptyM",
    "lastM",
    # Buffer - Iterable
    "group",
    "sort",
    "unique",
    "unzip",
    "zip",
    # Buffer - Generator
    "group_gen",
    "sort_gen",
    "unique_gen",
    "unzip_gen",
    "zip_gen",
    # Buffer - Async
    "group_async",
    "sort_async",
    "unique_async",
    "unzip_async",
    "zip_async",
    # Buffer - Generic
    "groupM",
    "sortM",
    "uniqueM",
    "unzipM",
    "zipM",
    # Writer
    "Entry",
    "Log",
    "record",
    "record_async",
    "record_gen",
    "recordM",
    # Errors
    "EmptySequenceError",
    "NotASequenceError",
)
