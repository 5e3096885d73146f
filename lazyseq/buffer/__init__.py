from .group import group, group_async, group_gen, groupM, unique, unique_async, unique_gen, uniqueM
from .sort import sort, sort_async, sort_gen, sortM
from .zip import unzip, unzip_async, unzip_gen, unzipM, zip, zip_async, zip_gen, zipM

__all__ = (
    # Iterable
    "group",
    "sort",
    "unique",
    "unzip",
    "zip",
    # Generator
    "group_gen",
    "sort_gen",
    "unique_gen",
    "unzip_gen",
    "zip_gen",
    # Async
    "group_async",
    "sort_async",
    "unique_async",
    "unzip_async",
    "zip_async",
    # Generic
    "groupM",
    "sortM",
    "uniqueM",
    "unzipM",
    "zipM",
)
