"""Tests for the StringCounter frequency table."""

import pytest

from column_summaries import IncompatibleSummaryError, NumRange, StringCounter


def _capture(counter: StringCounter, tokens) -> None:
    for token in tokens:
        assert counter.capture(token)


def test_counts_and_ranking() -> None:
    s = StringCounter()
    _capture(s, ["foo", "bar", "foo"])
    assert s.count() == 3

    _capture(s, ["bar"] * 3)
    assert s.count() == 6
    assert s.ranked() == [("bar", 4), ("foo", 2)]
    assert s.ranked_keys() == ["bar", "foo"]
    assert s.ranked_values() == [4, 2]
    assert s.distinct_count() == 2


def test_is_omnivore_and_accepts_anything() -> None:
    s = StringCounter()
    assert s.is_omnivore()
    for token in ["", " ", "NaN", "1", "2000-01-01", "ünïcödé", "a\tb"]:
        assert s.capture(token)
    assert s.count() == 7


def test_empty_counter() -> None:
    s = StringCounter()
    assert s.is_empty()
    assert s.count() == 0
    assert s.ranked() == []
    assert s.ranked_keys() == []
    assert s.ranked_values() == []

    s.capture("x")
    assert not s.is_empty()


def test_ties_break_by_key_regardless_of_order() -> None:
    tokens = ["pear", "apple", "fig", "apple", "pear", "kiwi"]
    forward = StringCounter()
    backward = StringCounter()
    _capture(forward, tokens)
    _capture(backward, reversed(tokens))

    expected = [("apple", 2), ("pear", 2), ("fig", 1), ("kiwi", 1)]
    assert forward.ranked() == expected
    assert backward.ranked() == expected


def test_eltype() -> None:
    class Label(str):
        pass

    assert StringCounter().eltype is str
    assert StringCounter(Label).eltype is Label

    with pytest.raises(TypeError):
        StringCounter(int)


def test_merge_adds_counts() -> None:
    left = StringCounter()
    right = StringCounter()
    _capture(left, ["a", "b", "a"])
    _capture(right, ["b", "b", "c"])

    assert left.merge(right) is left
    assert left.ranked() == [("b", 3), ("a", 2), ("c", 1)]
    assert left.count() == 6
    assert right.count() == 3


def test_merge_rejects_other_kinds() -> None:
    with pytest.raises(IncompatibleSummaryError):
        StringCounter().merge(NumRange(int))
