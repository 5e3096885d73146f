from .fold import (
    collect,
    collect_async,
    collect_gen,
    collectM,
    count,
    count_async,
    count_gen,
    countM,
    fold,
    fold_async,
    fold_gen,
    foldM,
    for_each,
    for_each_async,
    for_each_gen,
    for_eachM,
    last,
    last_async,
    last_gen,
    lastM,
)
from .lookup import (
    all,
    all_async,
    all_gen,
    allM,
    any,
    any_async,
    any_gen,
    anyM,
    find,
    find_async,
    find_gen,
    findM,
    first,
    first_async,
    first_gen,
    firstM,
    is_empty,
    is_empty_async,
    is_empty_gen,
    is_emptyM,
)

__all__ = (
    # Iterable
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
    # Generator
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
    # Async
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
    # Generic
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
)
