import logging
from copy import copy

import numpy as np
import pytest

from lazyseq.config import SequenceConfig
from lazyseq.protocols import Sequence
from lazyseq.sequence import (array, back, constant, drop, epsilon,
                              geometric, horner, last, length, linear, null,
                              pointer, product, same, sum, take)


class Countdown:
    def __init__(self, n):
        self.n = n

    def has_value(self):
        return self.n > 0

    def current(self):
        return self.n

    def advance(self):
        if self.n > 0:
            self.n -= 1
        return self


def test_user_defined_sequence():
    s = Countdown(3)
    assert isinstance(s, Sequence)
    assert length(s) == 3
    assert sum(s) == 6
    assert product(s) == 6
    assert back(s) == 1
    assert same(s, array([3, 2, 1]))
    assert s.current() == 3


def test_length():
    t = np.array([1, 2, 3])
    assert length(array(t)) == 3
    assert length(take(2, pointer(t))) == 2
    assert length(null(np.array([1, 2, 3, 0]))) == 3
    assert length(array(np.array([]))) == 0


@pytest.mark.parametrize("k", [0, 2, 3, 5])
def test_length_of_take(k):
    assert length(take(k, null(np.array([1, 2, 3, 0])))) == min(k, 3)
    assert length(take(k, array([1, 2, 3]))) == min(k, 3)


def test_drop():
    s = array([1, 2, 3])
    assert length(s) == 3
    assert length(drop(1, s)) == 2
    s1 = drop(1, s)
    assert s1
    assert s1.current() == 2
    s1.advance()
    assert s1
    assert s1.current() == 3
    s1.advance()
    assert not s1
    s1.advance()
    assert not s1
    assert length(drop(10, s)) == 0
    assert not drop(10, s)
    assert s.current() == 1


def test_drop_matches_advance():
    s = linear(0, 3)
    dropped = drop(4, s)
    for _ in range(4):
        s.advance()
    assert dropped == s
    assert list(take(3, dropped)) == list(take(3, s))


def test_last_and_back():
    s = array([1, 2, 3])
    end = last(s)
    assert end
    assert end.current() == 3
    end.advance()
    assert not end
    assert back(s) == 3
    assert back(null(np.array([4, 5, 0]))) == 5
    assert s.current() == 1


def test_same():
    s = array([1, 2, 3])
    assert same(s, copy(s))
    assert same(s, array([1, 2, 3]))
    assert same(s, null(np.array([1, 2, 3, 0])))
    assert not same(s, array([1, 2]))
    assert not same(array([1, 2]), s)
    assert not same(s, array([1, 2, 4]))
    assert same(array([]), array([]))
    assert s.current() == 1


def test_sum_and_product():
    s = null(np.array([1.0, 2.0, 3.0, 0.0]))
    assert sum(s) == 6
    assert product(s) == 6
    assert sum(take(4, constant(2))) == 8
    assert product(take(4, constant(2))) == 16


def test_empty_sum_and_product():
    empty = array(np.array([], dtype=np.int32))
    assert sum(empty) == 0
    assert product(empty) == 1
    assert sum(empty).dtype == np.int32
    assert type(sum(Countdown(0))) is int
    assert product(Countdown(0)) == 1
    assert horner(empty, 2) == 0


def test_geometric_series():
    assert sum(epsilon(geometric(1.0, 0.5))) == pytest.approx(2.0)


def test_horner():
    assert horner(array([1, 2, 3]), 2) == 1 + 2 * 2 + 3 * 4
    assert horner(array([5]), 10) == 5
    assert horner(Countdown(0), 3) == 0


def test_horner_recursive():
    s = epsilon(geometric(1.0, 0.5))
    expected = horner(s, 0.75)
    SequenceConfig.update({"horner_recursive": True})
    assert horner(s, 0.75) == expected
    assert horner(array([1, 2, 3]), 2) == 17


def test_horner_recursive_warning(caplog):
    SequenceConfig.update({"horner_recursive": True, "horner_recursion_warning": 2})
    with caplog.at_level(logging.WARNING):
        assert horner(array([1, 2, 3]), 2) == 17
    assert "recursive horner()" in caplog.text
