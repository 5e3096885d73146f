from __future__ import annotations

import operator as op

import pytest
from kungfu import Nothing

from lazyseq import (
    EmptySequenceError,
    all,
    any,
    collect,
    count,
    find,
    first,
    fold,
    for_each,
    from_,
    is_empty,
    last,
    of,
)

from fakes import Naturals, Pulls


def test_fold_seeded_and_unseeded() -> None:
    assert fold(of(1, 2, 3), 0, op.add) == 6
    assert fold(of(1, 2, 3), op.add) == 6
    assert fold(of(), 0, op.add) == 0
    assert fold(of("a", "b"), "", op.add) == "ab"


def test_fold_accepts_none_as_seed() -> None:
    assert fold(of(1, 2), None, lambda acc, x: x) == 2
    assert fold(of(), None, lambda acc, x: x) is None


def test_unseeded_fold_of_empty_source_raises() -> None:
    with pytest.raises(EmptySequenceError) as exc_info:
        fold(of(), op.add)

    assert exc_info.value.operation == "fold"
    assert isinstance(exc_info.value, LookupError)


def test_count_matches_fold() -> None:
    for numbers in (of(), of(1), of(1, 2, 3)):
        assert count(numbers) == fold(numbers, 0, lambda n, _: n + 1)


def test_terminal_opens_one_cursor_per_call() -> None:
    pulls = Pulls([1, 2, 3])
    numbers = from_(pulls)

    assert count(numbers) == 3
    assert count(numbers) == 3
    assert pulls.opened == 2
    assert pulls.pulled == 6


def test_first_pulls_exactly_one_value() -> None:
    naturals = Naturals()

    assert first(from_(naturals)).unwrap() == 0
    assert naturals.pulled == 1


def test_first_and_last_of_empty_source() -> None:
    assert isinstance(first(of()), Nothing)
    assert isinstance(last(of()), Nothing)


def test_last_returns_final_value() -> None:
    assert last(of(1, 2, 3)).unwrap() == 3
    assert last(of(None)).unwrap() is None


def test_is_empty() -> None:
    assert is_empty(of())
    assert not is_empty(of(None))
    assert not is_empty(from_(Naturals()))


def test_all_stops_on_first_failure() -> None:
    pulls = Pulls([2, 4, 5, 6])

    assert not all(from_(pulls), lambda x: x % 2 == 0)
    assert pulls.pulled == 3
    assert all(of(), lambda x: False)


def test_any_stops_on_first_success() -> None:
    naturals = Naturals()

    assert any(from_(naturals), lambda x: x > 2)
    assert naturals.pulled == 4
    assert not any(of(), lambda x: True)


def test_find_returns_first_match() -> None:
    assert find(of(1, 4, 6), lambda x: x % 2 == 0).unwrap() == 4
    assert isinstance(find(of(1, 3), lambda x: x % 2 == 0), Nothing)
    assert find(of(None, 1), lambda x: x is None).unwrap() is None


def test_for_each_visits_every_value_in_order() -> None:
    seen: list[int] = []

    assert for_each(of(1, 2, 3), seen.append) is None
    assert seen == [1, 2, 3]


def test_collect_hands_cursor_to_collector() -> None:
    assert collect(of(3, 1, 2), list) == [3, 1, 2]
    assert collect(of(("a", 1), ("b", 2)), dict) == {"a": 1, "b": 2}
    assert collect(of(1, 2, 2), frozenset) == frozenset({1, 2})


def test_terminal_stages() -> None:
    numbers = of(1, 2, 3)

    assert first()(numbers).unwrap() == 1
    assert last()(numbers).unwrap() == 3
    assert is_empty()(numbers) is False
    assert find(lambda x: x > 1)(numbers).unwrap() == 2
    assert collect(tuple)(numbers) == (1, 2, 3)
