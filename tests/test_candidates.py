"""Tests for the per-cell candidate set."""

import pytest

from sudokubench.candidates import CandidateSet
from sudokubench.common import EmptyCandidateSet


def test_full_and_empty():
    assert CandidateSet.full().count() == 9
    assert list(CandidateSet.full()) == list(range(1, 10))
    assert CandidateSet.empty().count() == 0
    assert list(CandidateSet.empty()) == []


def test_insert_remove_contains():
    s = CandidateSet.empty()
    s.insert(4)
    s.insert(9)
    assert s.contains(4)
    assert 9 in s
    assert 5 not in s
    s.remove(4)
    assert not s.contains(4)
    assert s.count() == 1
    s.remove(4)  # removing an absent digit is harmless
    assert s.count() == 1


def test_clear():
    s = CandidateSet.full()
    s.clear()
    assert len(s) == 0


def test_lowest_digit():
    s = CandidateSet.empty()
    s.insert(6)
    s.insert(4)
    assert s.lowest_digit() == 4
    assert CandidateSet.single(9).lowest_digit() == 9


def test_lowest_digit_of_empty_set_raises():
    with pytest.raises(EmptyCandidateSet):
        CandidateSet.empty().lowest_digit()


def test_subtract():
    s = CandidateSet.full()
    other = CandidateSet.empty()
    for d in (1, 5, 9):
        other.insert(d)
    s.subtract(other)
    assert list(s) == [2, 3, 4, 6, 7, 8]
    assert list(other) == [1, 5, 9]


def test_digits_are_ascending_and_restartable():
    s = CandidateSet.empty()
    for d in (7, 2, 5):
        s.insert(d)
    assert list(s.digits()) == [2, 5, 7]
    assert list(s.digits()) == [2, 5, 7]


def test_copy_is_independent():
    s = CandidateSet.full()
    t = s.copy()
    t.remove(3)
    assert 3 in s
    assert 3 not in t
    assert s != t


def test_str():
    s = CandidateSet.empty()
    for d in (9, 1, 4):
        s.insert(d)
    assert str(s) == "149"
    assert str(CandidateSet.empty()) == ""


def test_out_of_range_digit():
    with pytest.raises(AssertionError):
        CandidateSet.single(0)
    with pytest.raises(AssertionError):
        CandidateSet.full().contains(10)
