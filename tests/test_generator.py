from __future__ import annotations

import operator as op
from collections.abc import Iterator

import pytest

from lazyseq import generator as gen
from lazyseq import Log, NotASequenceError, Stage, from_, from_gen, is_producer, of_gen

from fakes import Naturals


def naturals() -> Iterator[int]:
    n = 0
    while True:
        yield n
        n += 1


def test_sequences_are_generator_functions() -> None:
    evens = gen.filter(naturals, lambda x: x % 2 == 0)

    assert is_producer(evens)
    assert list(gen.take(evens, 3)()) == [0, 2, 4]


def test_sequences_restart_on_every_call() -> None:
    squares = gen.take(gen.map(naturals, lambda x: x * x), 3)

    assert list(squares()) == [0, 1, 4]
    assert list(squares()) == [0, 1, 4]


def test_take_counter_resets_per_cursor() -> None:
    first_two = gen.take(naturals, 2)
    a, b = first_two(), first_two()

    assert next(a) == 0
    assert next(b) == 0
    assert list(a) == [1]
    assert list(b) == [1]


def test_curried_shape() -> None:
    stage = gen.map(lambda x: x + 1)

    assert isinstance(stage, Stage)
    assert list(gen.take(stage(naturals), 2)()) == [1, 2]


def test_pipeline_over_infinite_source() -> None:
    total = gen.pipe(
        naturals,
        gen.filter(lambda x: x % 3 == 0),
        gen.map(lambda x: x * 2),
        gen.take(4),
        gen.fold(0, op.add),
    )
    assert total == 0 + 6 + 12 + 18


def test_of_and_from() -> None:
    assert list(of_gen(1, 2)()) == [1, 2]
    assert list(from_gen([1, 2])()) == [1, 2]
    assert list(from_gen(lambda: iter("ab"))()) == ["a", "b"]
    assert from_gen(naturals) is naturals


def test_from_wraps_plain_cursor_producer() -> None:
    producer = Naturals()
    numbers = from_gen(producer)

    assert is_producer(numbers)
    assert list(gen.take(numbers, 2)()) == [0, 1]
    assert producer.pulled == 2


def test_from_rejects_non_sequences() -> None:
    with pytest.raises(NotASequenceError):
        from_gen(42)


def test_chain_requires_generator_functions() -> None:
    def repeat(x: int) -> object:
        return of_gen(x, x)

    assert list(gen.chain(of_gen(1, 2), repeat)()) == [1, 1, 2, 2]


def test_concat_and_zip() -> None:
    assert list(gen.concat(of_gen(1), of_gen(2))()) == [1, 2]
    assert list(gen.zip(of_gen(1, 2), naturals)()) == [(1, 0), (2, 1)]

    firsts, seconds = gen.unzip(of_gen((1, "a"), (2, "b")))
    assert list(firsts()) == [1, 2]
    assert list(seconds()) == ["a", "b"]


def test_scan_and_enumerate() -> None:
    assert list(gen.take(gen.scan(naturals, op.add), 4)()) == [0, 1, 3, 6]
    assert list(gen.take(gen.enumerate(gen.skip(naturals, 5)), 2)()) == [(0, 5), (1, 6)]


def test_buffering_operators() -> None:
    assert list(gen.sort(of_gen(3, 1, 2))()) == [1, 2, 3]
    assert list(gen.unique(of_gen(1, 1, 2))()) == [1, 2]

    groups = [(k, list(values())) for k, values in gen.group(of_gen(1, 2, 3), lambda x: x % 2)()]
    assert groups == [(1, [1, 3]), (0, [2])]


def test_terminals() -> None:
    numbers = of_gen(1, 2, 3)

    assert gen.count(numbers) == 3
    assert gen.first(naturals).unwrap() == 0
    assert gen.last(numbers).unwrap() == 3
    assert gen.find(naturals, lambda x: x > 10).unwrap() == 11
    assert gen.any(naturals, lambda x: x > 10)
    assert not gen.all(naturals, lambda x: x < 10)
    assert not gen.is_empty(numbers)
    assert gen.collect(numbers, list) == [1, 2, 3]


def test_take_while_and_skip_while() -> None:
    assert list(gen.take_while(naturals, lambda x: x < 3)()) == [0, 1, 2]
    assert list(gen.take(gen.skip_while(naturals, lambda x: x < 3), 2)()) == [3, 4]


def test_tap_and_record() -> None:
    seen: list[int] = []
    log: Log[int] = Log()
    numbers = gen.record(gen.tap(of_gen(1, 2, 3), seen.append), log)

    assert list(gen.take(numbers, 2)()) == [1, 2]
    assert seen == [1, 2]
    assert log == [1, 2]


def test_for_each() -> None:
    seen: list[int] = []
    gen.for_each(of_gen(1, 2), seen.append)
    assert seen == [1, 2]


def test_plain_iterables_are_not_generator_sequences() -> None:
    with pytest.raises(TypeError):
        gen.count([1, 2])


def test_from_adopts_lazy_iterables_without_snapshot() -> None:
    producer = Naturals()
    numbers = from_gen(from_(producer))

    assert list(gen.take(numbers, 2)()) == [0, 1]
    assert list(gen.take(numbers, 2)()) == [0, 1]
    assert producer.pulled == 4
