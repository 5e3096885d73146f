from __future__ import annotations

from _infra import banner, run, users

from lazyseq import filter, from_, map, record, take
from lazyseq.writer import Entry, Log


async def main() -> None:
    banner("03_writer_logs: Log + record show what was pulled, and when")

    log: Log[Entry[object]] = Log()

    pipeline = (
        record(log, label="source")
        | filter(lambda user: user.is_active)
        | record(log, label="active")
        | map(lambda user: user.name)
        | take(2)
    )

    print(list(pipeline(from_(users))))
    print(f"pulled ids: {[user.id for user in log.labelled('source')]}")
    print(f"kept ids:   {[user.id for user in log.labelled('active')]}")


if __name__ == "__main__":
    run(main)
