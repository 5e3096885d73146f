from __future__ import annotations

from _infra import banner, run, users

from lazyseq import generator as G


async def main() -> None:
    banner("02_generator_streams: generator functions as restartable sequences")

    batches = G.pipe(
        users,
        G.filter(lambda user: user.is_active),
        G.map(lambda user: user.id),
        G.enumerate(),
        G.take(5),
    )

    # every call opens a fresh cursor
    print(list(batches()))
    print(list(batches()))

    ids, names = G.unzip(G.map(G.take(users, 3), lambda user: (user.id, user.name)))
    print(list(G.zip(names, ids)()))

    for parity, group in G.group(G.take(users, 6), lambda user: user.id % 2)():
        print(parity, [user.name for user in group()])


if __name__ == "__main__":
    run(main)
