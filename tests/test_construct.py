from __future__ import annotations

import pytest

from lazyseq import NotASequenceError, Reiterable, from_, is_sequence, of

from fakes import Pulls


def test_of_yields_arguments_in_order() -> None:
    assert list(of(1, 2, 3)) == [1, 2, 3]
    assert list(of()) == []


def test_of_is_restartable() -> None:
    numbers = of(1, 2, 3)
    assert list(numbers) == list(numbers) == [1, 2, 3]


def test_from_returns_sequences_unchanged() -> None:
    numbers = of(1, 2)
    assert from_(numbers) is numbers

    cursor = iter([1, 2])
    assert from_(cursor) is cursor


def test_from_is_idempotent() -> None:
    once = from_([1, 2, 3])
    assert from_(once) is once
    assert list(from_(from_([1, 2, 3]))) == list(from_([1, 2, 3]))


def test_from_snapshots_collections() -> None:
    items = [1, 2]
    snapshot = from_(items)
    items.append(3)

    assert list(snapshot) == [1, 2]


def test_from_snapshots_strings_into_characters() -> None:
    assert list(from_("abc")) == ["a", "b", "c"]


def test_from_adopts_cursor_producer() -> None:
    pulls = Pulls([1, 2])
    numbers = from_(pulls)

    assert pulls.opened == 0
    assert list(numbers) == [1, 2]
    assert list(numbers) == [1, 2]
    assert pulls.opened == 2


def test_from_accepts_producer_returning_plain_iterable() -> None:
    assert list(from_(lambda: range(3))) == [0, 1, 2]


def test_from_rejects_non_sequences() -> None:
    with pytest.raises(NotASequenceError) as exc_info:
        from_(42)

    assert exc_info.value.value == 42
    assert isinstance(exc_info.value, TypeError)


def test_reiterable_gives_independent_cursors() -> None:
    numbers = Reiterable(lambda: iter([1, 2, 3]))
    first, second = iter(numbers), iter(numbers)

    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1


def test_exhausted_cursor_stays_exhausted() -> None:
    cursor = iter(of(1))
    assert list(cursor) == [1]
    assert list(cursor) == []
    assert next(cursor, None) is None


def test_is_sequence() -> None:
    assert is_sequence(of(1))
    assert is_sequence([1, 2])
    assert is_sequence(iter([]))
    assert not is_sequence("abc")
    assert not is_sequence(b"abc")
    assert not is_sequence(42)
    assert not is_sequence(lambda: iter([]))
