"""Numerical utilities."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "expected_top_difference",
    "as_value_array",
]


def expected_top_difference(leading_coefficient: Any, degree: int, step: Any) -> Any:
    """Returns the constant ``d``-th forward difference ``d! * c_d * h**d``.

    For a degree-``d`` polynomial sampled with fixed step ``h`` the ``d``-th
    forward difference does not depend on the sample point. The result has
    the coefficient's type, so it is exact for ``int`` and ``Fraction``.

    Args:
        leading_coefficient: Coefficient ``c_d`` of ``x**d``.
        degree: Polynomial degree ``d``.
        step: Progression step ``h``.

    Returns:
        ``d! * c_d * h**d``.
    """
    if degree < 0:
        raise ValueError(f"degree must be non-negative; got {degree}.")
    result = leading_coefficient * math.factorial(degree)
    for _ in range(degree):
        result = result * step
    return result


def as_value_array(values: Sequence[Any]) -> NDArray:
    """Packs tabulated values into a NumPy array.

    Python ``int`` and ``float`` values map onto the matching NumPy dtype.
    Values NumPy cannot represent natively (``Fraction``, integers beyond
    64 bits) are kept as Python objects rather than silently rounded.

    Args:
        values: Sequence of tabulated values.

    Returns:
        1D NumPy array (or 2D when each value is itself a 1D array).
    """
    try:
        arr = np.asarray(values)
    except OverflowError:
        return np.asarray(values, dtype=object)
    return arr
