from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Pulls:
    """Cursor producer that counts opened cursors and produced values."""

    values: Sequence[Any]
    opened: int = 0
    pulled: int = 0

    def __call__(self) -> Iterator[Any]:
        self.opened += 1
        for value in self.values:
            self.pulled += 1
            yield value


@dataclass
class AsyncPulls:
    """Async twin of Pulls, suspending once per value."""

    values: Sequence[Any]
    opened: int = 0
    pulled: int = 0

    def __call__(self) -> AsyncIterator[Any]:
        return self._produce()

    async def _produce(self) -> AsyncIterator[Any]:
        self.opened += 1
        for value in self.values:
            await asyncio.sleep(0)
            self.pulled += 1
            yield value


@dataclass
class Naturals:
    """Infinite producer 0, 1, 2, ... counting produced values."""

    pulled: int = 0

    def __call__(self) -> Iterator[int]:
        n = 0
        while True:
            self.pulled += 1
            yield n
            n += 1


@dataclass
class Delays:
    """Async callback whose results resolve in reverse order of the calls."""

    finished: list[Any] = field(default_factory=list)

    async def __call__(self, value: int) -> int:
        await asyncio.sleep(0.001 * (10 - value))
        self.finished.append(value)
        return value * 10
