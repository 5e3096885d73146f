from .concat import concat, concat_async, concat_gen, concatM, enumerate, enumerate_async, enumerate_gen, enumerateM
from .effects import tap, tap_async, tap_gen, tapM
from .filter import (
    filter,
    filter_async,
    filter_gen,
    filterM,
    skip,
    skip_async,
    skip_gen,
    skip_while,
    skip_while_async,
    skip_while_gen,
    skip_whileM,
    skipM,
    take,
    take_async,
    take_gen,
    take_while,
    take_while_async,
    take_while_gen,
    take_whileM,
    takeM,
)
from .map import chain, chain_async, chain_gen, chainM, map, map_async, map_gen, mapM
from .scan import scan, scan_async, scan_gen, scanM

__all__ = (
    # Iterable
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
    # Generator
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
    # Async
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
    # Generic
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
)
