"""Tests for the Interval value type."""

from dataclasses import FrozenInstanceError

import pytest

from rangelist import Interval, InvertedRangeError


def test_str_is_half_open():
    assert str(Interval(start=1, end=5)) == "[1, 5)"
    assert str(Interval(start=-3, end=0)) == "[-3, 0)"


def test_empty_interval_is_allowed():
    """start == end is a legal, empty interval."""
    interval = Interval(start=20, end=20)
    assert interval.is_empty
    assert not Interval(start=20, end=21).is_empty


def test_inverted_interval_rejected():
    with pytest.raises(InvertedRangeError):
        Interval(start=5, end=1)


def test_inverted_interval_is_a_value_error():
    with pytest.raises(ValueError, match="must be <= end"):
        Interval(start=5, end=1)


def test_interval_is_frozen():
    interval = Interval(start=1, end=5)
    with pytest.raises(FrozenInstanceError):
        interval.start = 2  # type: ignore[misc]


def test_keyword_only():
    with pytest.raises(TypeError):
        Interval(1, 5)  # type: ignore[misc]
