from __future__ import annotations

import operator

from _infra import banner, run, users

from kungfu import Nothing
from lazyseq import count, filter, find, fold, from_, map, of, pipe, sort, take, unique


async def main() -> None:
    banner("01_quickstart: both call shapes + pipelines")

    numbers = of(3, 1, 4, 1, 5, 9, 2, 6)

    # apply now
    print(list(map(filter(numbers, lambda n: n % 2 == 1), lambda n: n * n)))

    # stages, applied left to right
    print(pipe(numbers, unique(), sort(), map(str), fold("", operator.add)))

    # infinite source, pulled only as far as take() asks
    active = pipe(from_(users), filter(lambda user: user.is_active), take(4))
    print([user.name for user in active])
    print(f"active users: {count(active)}")

    match find(from_(users), lambda user: user.id > 10 and not user.is_active):
        case Nothing():
            print("nobody inactive")
        case found:
            print(f"first inactive after 10: {found.unwrap().name}")


if __name__ == "__main__":
    run(main)
