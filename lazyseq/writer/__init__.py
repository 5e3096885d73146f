"""
Writer
======

Observability for pipelines without a logger:
- Log: моноидный аккумулятор (list + combine/tell)
- record: lazy pass-through that writes every pulled value into a Log
"""

from .log import Entry, Log
from .record import record, record_async, record_gen, recordM

__all__ = (
    "Entry",
    "Log",
    "record",
    "record_gen",
    "record_async",
    "recordM",
)
