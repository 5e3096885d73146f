from __future__ import annotations

from _infra import FakeFeed, banner, run

from lazyseq import aio as A


async def main() -> None:
    banner("04_async_pages: async flat-map over a paginated feed")

    feed = FakeFeed(pages=10, delay_seconds=0.01)

    names = A.pipe(
        A.from_(feed),
        A.chain(feed.fetch_page),
        A.filter(lambda user: user.is_active),
        A.map(lambda user: user.name),
        A.take(4),
    )

    print(await A.collect(names, list))
    # take(4) is satisfied by the second page, the rest is never requested
    print(f"pages requested: {feed.requests}")


if __name__ == "__main__":
    run(main)
