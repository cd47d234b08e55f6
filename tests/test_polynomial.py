"""Unit tests for tabkit.polynomial."""

from __future__ import annotations

import copy
from fractions import Fraction

import numpy as np
import pytest

from tabkit.polynomial import Polynomial


def test_evaluate_uses_ascending_coefficients():
    """Tests that index k holds the coefficient of x**k."""
    p = Polynomial([1, 2, 3])
    assert p.evaluate(7) == 1 + 2 * 7 + 3 * 7 * 7
    assert p(7) == p.evaluate(7)


def test_from_descending_reverses_order():
    """Tests that from_descending accepts highest-degree-first coefficients."""
    p = Polynomial.from_descending([3, 2, 1])
    assert p.coefficients == (1, 2, 3)
    assert p == Polynomial([1, 2, 3])


def test_degree_and_leading_coefficient():
    """Tests degree bookkeeping, including kept trailing zeros."""
    p = Polynomial([4, 0, 0])
    assert p.degree == 2
    assert p.leading_coefficient == 0
    assert len(p) == 3
    assert p.evaluate(10) == 4


def test_constant_polynomial_evaluates_without_point_dependence():
    """Tests that a degree-0 polynomial returns its constant everywhere."""
    p = Polynomial([5])
    assert p.degree == 0
    assert [p.evaluate(x) for x in (-3, 0, 2.5)] == [5, 5, 5]


def test_empty_coefficients_rejected():
    """Tests that an empty coefficient sequence is a usage error."""
    with pytest.raises(ValueError):
        Polynomial([])
    with pytest.raises(ValueError):
        Polynomial(np.array([]))


def test_non_iterable_coefficients_rejected():
    """Tests that a scalar is not accepted as a coefficient sequence."""
    with pytest.raises(TypeError):
        Polynomial(3)


def test_polynomial_is_immutable():
    """Tests that attributes cannot be reassigned."""
    p = Polynomial([1, 2])
    with pytest.raises(AttributeError):
        p.coefficients = (3, 4)
    with pytest.raises(AttributeError):
        p.other = 1


def test_input_sequence_is_copied():
    """Tests that mutating the caller's list does not change the polynomial."""
    coeffs = [1, 2, 3]
    p = Polynomial(coeffs)
    coeffs[0] = 100
    assert p.coefficients == (1, 2, 3)


def test_fraction_coefficients_are_exact():
    """Tests Horner evaluation stays exact for Fractions."""
    p = Polynomial([Fraction(1, 2), Fraction(-1, 3), Fraction(1, 6)])
    x = Fraction(3, 2)
    expected = Fraction(1, 2) - Fraction(1, 3) * x + Fraction(1, 6) * x * x
    assert p.evaluate(x) == expected


def test_numpy_array_coefficients_and_points():
    """Tests NumPy inputs: array coefficients and vectorised evaluation points."""
    p = Polynomial(np.array([1.0, 0.0, 2.0]))
    xs = np.array([0.0, 1.0, 2.0])
    np.testing.assert_allclose(p.evaluate(xs), [1.0, 3.0, 9.0])


def test_evaluate_many_matches_single_evaluations():
    """Tests evaluate_many against evaluate."""
    p = Polynomial([2, -1, 0, 1])
    xs = [-2, -1, 0, 1, 2]
    assert p.evaluate_many(xs) == [p.evaluate(x) for x in xs]


def test_equality_hash_and_copy():
    """Tests value semantics."""
    p = Polynomial([1, 2, 3])
    q = Polynomial((1, 2, 3))
    assert p == q
    assert hash(p) == hash(q)
    assert p != Polynomial([1, 2])
    assert p != Polynomial([1, 2, 4])
    assert copy.deepcopy(p) == p
    assert repr(p) == "Polynomial([1, 2, 3])"


def test_hash_with_array_coefficients():
    """Tests that vector-valued polynomials hash consistently with equality."""
    p = Polynomial([np.array([1, 2]), np.array([3, 4])])
    q = Polynomial([np.array([1.0, 2.0]), np.array([3.0, 4.0])])
    assert p == q
    assert hash(p) == hash(q)
    assert len({p, q}) == 1
