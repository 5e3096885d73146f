from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine, Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def users() -> Iterator[User]:
    """Endless user table: every third user is inactive."""
    user_id = 1
    while True:
        yield User(id=user_id, name=f"user:{user_id}", is_active=user_id % 3 != 0)
        user_id += 1


@dataclass(slots=True)
class FakeFeed:
    """Paginated async API: one page per request, until pages run out."""

    pages: int
    page_size: int = 3
    delay_seconds: float = 0.0
    requests: int = 0

    async def fetch_page(self, page: int) -> list[User]:
        await asyncio.sleep(self.delay_seconds)
        self.requests += 1
        start = page * self.page_size + 1
        return [
            User(id=i, name=f"user:{i}", is_active=i % 3 != 0)
            for i in range(start, start + self.page_size)
        ]

    async def __call__(self) -> AsyncIterator[int]:
        for page in range(self.pages):
            yield page


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
