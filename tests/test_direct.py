"""Unit tests for tabkit.tabulation.direct."""

from __future__ import annotations

import pytest

from tabkit.polynomial import Polynomial
from tabkit.tabulation.direct import DirectEvaluator


def test_direct_squares():
    """Tests direct evaluation of x**2 over six points."""
    d = DirectEvaluator(Polynomial([0, 0, 1]), x0=0, step=1, count=6)
    assert list(d) == [0, 1, 4, 9, 16, 25]
    with pytest.raises(StopIteration):
        next(d)


def test_direct_bookkeeping_and_points():
    """Tests index, remaining and (x, p(x)) pairs."""
    d = DirectEvaluator(Polynomial([3, 2]), x0=5, step=2, count=4)
    assert d.remaining == 4
    assert next(d) == 13
    assert d.index == 1
    assert d.remaining == 3
    assert list(d.points()) == [(7, 17), (9, 21), (11, 25)]


def test_direct_unbounded():
    """Tests that count=None never exhausts."""
    d = DirectEvaluator(Polynomial([1, 1]), x0=0, step=1)
    assert d.remaining is None
    assert [next(d) for _ in range(5)] == [1, 2, 3, 4, 5]


def test_direct_rejects_zero_step():
    """Tests the degenerate progression check."""
    with pytest.raises(ValueError):
        DirectEvaluator(Polynomial([1, 1]), x0=0, step=0, count=2)
    d = DirectEvaluator(Polynomial([1, 1]), x0=0, step=0, count=2, allow_zero_step=True)
    assert list(d) == [1, 1]
