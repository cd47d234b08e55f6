"""Provides the Polynomial class.

Coefficients are stored in ascending order of degree: index ``k`` holds the
coefficient of ``x**k``. Use :meth:`Polynomial.from_descending` when the
coefficients come highest degree first (the NumPy ``polyval`` convention).

Examples:
--------
>>> from tabkit.polynomial import Polynomial
>>> p = Polynomial([1, 2, 3])  # 1 + 2x + 3x^2
>>> p.evaluate(7)
162
>>> Polynomial.from_descending([3, 2, 1]) == p
True
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from tabkit.utils.types import Coefficients
from tabkit.utils.validate import validate_coefficients


class Polynomial:
    """Immutable single-variable polynomial with a fixed, declared degree.

    The degree is ``len(coefficients) - 1``. Trailing zero coefficients are
    kept, so ``Polynomial([1, 0])`` has degree 1 even though it is constant.

    Coefficients can be any type closed under ``+``, ``-`` and ``*``:
    ``int``, :class:`fractions.Fraction`, ``float``, NumPy scalars, or NumPy
    arrays for a vector-valued polynomial.

    Attributes:
        coefficients: Tuple ``(c0, ..., cd)``.
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Coefficients) -> None:
        """Initialises the polynomial from ascending-order coefficients.

        Args:
            coefficients: Ordered coefficients ``c0..cd``.

        Raises:
            ValueError: If ``coefficients`` is empty.
        """
        object.__setattr__(self, "_coefficients", validate_coefficients(coefficients))

    @classmethod
    def from_descending(cls, coefficients: Coefficients) -> Polynomial:
        """Builds a polynomial from coefficients given highest degree first."""
        return cls(validate_coefficients(coefficients)[::-1])

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    @property
    def coefficients(self) -> tuple[Any, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    @property
    def leading_coefficient(self) -> Any:
        """Coefficient of ``x**degree``."""
        return self._coefficients[-1]

    def evaluate(self, x: Any) -> Any:
        """Evaluates the polynomial at ``x`` using Horner's rule.

        Accumulates from the highest-degree coefficient down,
        ``acc = acc * x + c_k``, for ``d`` multiply-adds in total.

        Args:
            x: Evaluation point, an element of the coefficient ring.

        Returns:
            The value ``p(x)``.
        """
        coeffs = self._coefficients
        acc = coeffs[-1]
        for c in reversed(coeffs[:-1]):
            acc = acc * x + c
        return acc

    __call__ = evaluate

    def evaluate_many(self, xs: Iterable[Any]) -> list[Any]:
        """Evaluates the polynomial directly at every point of ``xs``."""
        return [self.evaluate(x) for x in xs]

    def __len__(self) -> int:
        return len(self._coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            np.array_equal(a, b) for a, b in zip(self._coefficients, other._coefficients)
        )

    def __hash__(self) -> int:
        return hash(tuple(_freeze(c) for c in self._coefficients))

    def __reduce__(self):
        return (type(self), (self._coefficients,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._coefficients)!r})"


def _freeze(value: Any) -> Any:
    """Returns a hashable stand-in for a coefficient.

    Arrays become nested tuples of their elements, so two coefficients that
    compare equal under ``np.array_equal`` hash alike.
    """
    if isinstance(value, np.ndarray):
        return _as_tuple(value.tolist())
    return value


def _as_tuple(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_as_tuple(v) for v in value)
    return value
