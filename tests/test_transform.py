from __future__ import annotations

import operator as op

from lazyseq import (
    Log,
    chain,
    concat,
    count,
    enumerate,
    filter,
    from_,
    map,
    of,
    record,
    scan,
    skip,
    skip_while,
    take,
    take_while,
    tap,
)

from fakes import Naturals, Pulls


def test_map_preserves_order_and_count() -> None:
    assert list(map(of(1, 2, 3), lambda x: x * 2)) == [2, 4, 6]


def test_transforms_pull_nothing_until_iterated() -> None:
    pulls = Pulls([1, 2, 3])
    pipeline = take(filter(map(from_(pulls), str), bool), 2)

    assert pulls.opened == 0
    assert list(pipeline) == ["1", "2"]
    assert pulls.opened == 1


def test_chain_drains_each_inner_sequence_first() -> None:
    log: Log[object] = Log()
    pairs = chain(of(1, 2), lambda x: record(of(x, x * 10), log))

    assert list(pairs) == [1, 10, 2, 20]
    assert log == [1, 10, 2, 20]


def test_filter_keeps_matching_values_in_order() -> None:
    assert list(filter(of(1, 2, 3, 4), lambda x: x % 2 == 0)) == [2, 4]
    assert list(filter(of(1, 3), lambda x: x % 2 == 0)) == []


def test_take_while_consumes_failing_value_and_stops() -> None:
    pulls = Pulls([1, 2, 5, 3, 4])
    assert list(take_while(from_(pulls), lambda x: x < 3)) == [1, 2]
    assert pulls.pulled == 3


def test_take_does_not_pull_past_the_last_value() -> None:
    naturals = Naturals()
    assert list(take(from_(naturals), 3)) == [0, 1, 2]
    assert naturals.pulled == 3


def test_take_non_positive_opens_no_cursor() -> None:
    pulls = Pulls([1, 2])

    assert list(take(from_(pulls), 0)) == []
    assert list(take(from_(pulls), -1)) == []
    assert pulls.opened == 0


def test_take_count_property() -> None:
    numbers = of(1, 2, 3)
    for n in (-1, 0, 1, 3, 5):
        assert count(take(numbers, n)) == max(0, min(n, count(numbers)))


def test_take_counter_is_per_cursor() -> None:
    first_two = take(of(1, 2, 3), 2)
    assert list(first_two) == [1, 2]
    assert list(first_two) == [1, 2]


def test_skip_drops_leading_values() -> None:
    assert list(skip(of(1, 2, 3, 4), 2)) == [3, 4]
    assert list(skip(of(1, 2), 5)) == []
    assert list(skip(of(1, 2), 0)) == [1, 2]


def test_skip_counter_is_per_cursor() -> None:
    tail = skip(of(1, 2, 3), 1)
    assert list(tail) == [2, 3]
    assert list(tail) == [2, 3]


def test_skip_while_stops_asking_after_first_failure() -> None:
    asked: list[int] = []

    def small(x: int) -> bool:
        asked.append(x)
        return x < 3

    assert list(skip_while(of(1, 2, 3, 1, 2), small)) == [3, 1, 2]
    assert asked == [1, 2, 3]


def test_enumerate_pairs_index_and_value() -> None:
    assert list(enumerate(of("a", "b"))) == [(0, "a"), (1, "b")]
    assert list(enumerate()(of())) == []


def test_concat_drains_first_then_second() -> None:
    assert list(concat(of(1, 2), of(3, 4))) == [1, 2, 3, 4]


def test_concat_never_reaches_second_after_infinite_first() -> None:
    other = Pulls([100])
    assert list(take(concat(from_(Naturals()), from_(other)), 3)) == [0, 1, 2]
    assert other.opened == 0


def test_scan_yields_running_accumulator() -> None:
    assert list(scan(of(1, 2, 3), 0, op.add)) == [1, 3, 6]
    assert list(scan(of(1, 2, 3), op.add)) == [1, 3, 6]
    assert list(scan(of("a", "b"), "", op.add)) == ["a", "ab"]


def test_unseeded_scan_does_not_call_reducer_on_first_value() -> None:
    calls: list[tuple[int, int]] = []

    def add(acc: int, x: int) -> int:
        calls.append((acc, x))
        return acc + x

    assert list(scan(of(5, 1), add)) == [5, 6]
    assert calls == [(5, 1)]


def test_unseeded_scan_of_empty_source_yields_nothing() -> None:
    assert list(scan(of(), op.add)) == []
    assert list(scan(of(), 0, op.add)) == []


def test_scan_state_is_per_cursor() -> None:
    totals = scan(of(1, 2), 0, op.add)
    assert list(totals) == [1, 3]
    assert list(totals) == [1, 3]


def test_tap_observes_pulled_values_only() -> None:
    seen: list[int] = []
    assert list(take(tap(of(1, 2, 3), seen.append), 2)) == [1, 2]
    assert seen == [1, 2]


def test_callback_errors_propagate_to_consumer() -> None:
    def explode(x: int) -> int:
        raise ValueError(x)

    numbers = map(of(1, 2), explode)

    try:
        list(numbers)
    except ValueError as exc:
        assert exc.args == (1,)
    else:
        raise AssertionError("expected ValueError")
