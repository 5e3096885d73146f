from __future__ import annotations

import operator as op

import pytest

from lazyseq import (
    Log,
    Stage,
    collect,
    compose,
    concat,
    count,
    filter,
    fold,
    map,
    of,
    pipe,
    record,
    scan,
    sort,
    take,
    unique,
    zip,
)


def double(x: int) -> int:
    return x * 2


def is_even(x: int) -> bool:
    return x % 2 == 0


def test_direct_and_curried_shapes_agree() -> None:
    numbers = of(1, 2, 3, 4)

    assert list(map(numbers, double)) == list(map(double)(numbers)) == [2, 4, 6, 8]
    assert list(filter(numbers, is_even)) == list(filter(is_even)(numbers)) == [2, 4]
    assert list(take(numbers, 2)) == list(take(2)(numbers)) == [1, 2]
    assert count(numbers) == count()(numbers) == 4


def test_curried_call_returns_stage() -> None:
    stage = map(double)

    assert isinstance(stage, Stage)
    assert stage.name == "map"


def test_stages_compose_left_to_right() -> None:
    evens_doubled = filter(is_even) | map(double)

    assert isinstance(evens_doubled, Stage)
    assert list(evens_doubled(range(10))) == [0, 4, 8, 12, 16]
    assert evens_doubled.name == "filter | map"


def test_stage_then_accepts_plain_callables() -> None:
    to_list = map(double).then(list)
    assert to_list(of(1, 2)) == [2, 4]


def test_pipe_threads_source_through_stages() -> None:
    total = pipe(of(1, 2, 3, 4), filter(is_even), map(double), fold(0, op.add))
    assert total == 12


def test_compose_builds_one_stage() -> None:
    summary = compose(sort(), unique(), collect(list))
    assert summary(of(3, 1, 3, 2, 1)) == [1, 2, 3]


def test_compose_requires_stages() -> None:
    with pytest.raises(ValueError):
        compose()


def test_sequence_parameters_dispatch_by_count() -> None:
    head, tail = of(1, 2), of(3, 4)

    assert list(concat(head, tail)) == [1, 2, 3, 4]
    assert list(concat(tail)(head)) == [1, 2, 3, 4]
    assert list(zip(of(1, 2), of("a", "b"))) == [(1, "a"), (2, "b")]
    assert list(zip(of("a", "b"))(of(1, 2))) == [(1, "a"), (2, "b")]


def test_fold_call_shapes() -> None:
    numbers = of(1, 2, 3)

    assert fold(numbers, 10, op.add) == 16  # direct, seeded
    assert fold(numbers, op.add) == 6  # direct, unseeded
    assert fold(10, op.add)(numbers) == 16  # curried, seeded
    assert fold(op.add)(numbers) == 6  # curried, unseeded


def test_scan_call_shapes() -> None:
    numbers = of(1, 2, 3)

    assert list(scan(numbers, 10, op.add)) == [11, 13, 16]
    assert list(scan(numbers, op.add)) == [1, 3, 6]
    assert list(scan(10, op.add)(numbers)) == [11, 13, 16]
    assert list(scan(op.add)(numbers)) == [1, 3, 6]


def test_optional_parameter_operators() -> None:
    words = of("b", "A", "a", "B")

    assert list(unique(words)) == ["b", "A", "a", "B"]
    assert list(unique(str.lower)(words)) == ["b", "A"]
    assert list(unique()(words)) == ["b", "A", "a", "B"]


def test_keyword_options_pass_through_both_shapes() -> None:
    numbers = of(1, 3, 2)

    assert list(sort(numbers, reverse=True)) == [3, 2, 1]
    assert list(sort(reverse=True)(numbers)) == [3, 2, 1]


def test_wrong_arity_fails_at_call_time() -> None:
    with pytest.raises(TypeError, match="map"):
        map(of(1), double, double)

    with pytest.raises(TypeError, match="map"):
        map()

    with pytest.raises(TypeError, match="count"):
        count(42)


def test_strings_are_not_sources() -> None:
    # "" is the seed here, not the source
    stage = fold("", op.add)

    assert isinstance(stage, Stage)
    assert stage(of("a", "b")) == "ab"


def test_source_without_parameters_fails_at_call_time() -> None:
    with pytest.raises(TypeError, match="map\\(\\) missing parameters after the source"):
        map(of(1, 2))

    with pytest.raises(TypeError, match="fold"):
        fold(of(1, 2))


def test_sequence_parameters_still_build_stages() -> None:
    log: Log[int] = Log()

    assert isinstance(concat(of(3)), Stage)
    assert isinstance(zip(of("a")), Stage)
    assert list(record(log)(of(1))) == [1]
    assert log == [1]
