"""Provides the DifferenceTable class.

A difference table holds the leading diagonal of the forward-difference
pyramid of a degree-``d`` polynomial sampled with step ``h``:

.. code-block:: text

    v0     v1     v2     v3          D[0] = v0
      Δv0    Δv1    Δv2              D[1] = Δv0
        Δ²v0   Δ²v1                  D[2] = Δ²v0
          Δ³v0                       D[3] = Δ³v0

Only the diagonal ``D[k] = Δ^k v0`` is kept. It describes the polynomial at
the current position ``x``, and :meth:`DifferenceTable.advance` moves it to
``x + h`` with ``d`` additions. ``D[d]`` equals ``d! * c_d * h**d`` and
never changes.

Examples:
--------
>>> from tabkit.tabulation.difference_table import DifferenceTable
>>> table = DifferenceTable.from_values([0, 1, 4])  # x**2 at 0, 1, 2
>>> table.diagonal
(0, 1, 2)
>>> table.advance()
>>> table.diagonal
(1, 3, 2)
"""

from __future__ import annotations

from typing import Any, Sequence

from tabkit.polynomial import Polynomial
from tabkit.utils.validate import validate_bootstrap_values

__all__ = [
    "DifferenceTable",
    "bootstrap_points",
]


def bootstrap_points(x0: Any, step: Any, count: int) -> list[Any]:
    """Returns ``count`` progression points ``x0, x0 + h, ...``.

    Points are generated by repeated addition of ``step``, so no
    multiplication by the point index is needed.
    """
    points = []
    x = x0
    for _ in range(count):
        points.append(x)
        x = x + step
    return points


class DifferenceTable:
    """Leading diagonal of a forward-difference pyramid.

    The table exclusively owns its storage. It is mutated in place by
    :meth:`advance`; use :meth:`copy` to get an independent table.
    """

    __slots__ = ("_diagonal",)

    def __init__(self, diagonal: Sequence[Any]) -> None:
        """Wraps an already collapsed diagonal ``D[0..d]``.

        Most callers want :meth:`from_values` or :meth:`from_polynomial`.

        Args:
            diagonal: Forward differences ``Δ^0 p(x), ..., Δ^d p(x)``.
        """
        self._diagonal = list(diagonal)

    @classmethod
    def from_values(cls, values: Sequence[Any], degree: int | None = None) -> DifferenceTable:
        """Builds a table from ``d + 1`` bootstrap samples.

        The pyramid is collapsed in a single array of length ``d + 1``:
        level ``k`` replaces ``D[j]`` with ``D[j] - D[j-1]`` for ``j`` from
        ``d`` down to ``k``, leaving ``D[k] = Δ^k v0``. This costs
        ``d * (d + 1) / 2`` subtractions.

        Args:
            values: Samples ``p(x0), p(x0 + h), ..., p(x0 + d*h)``.
            degree: Polynomial degree ``d``. Defaults to ``len(values) - 1``.

        Returns:
            The difference table positioned at ``x0``.

        Raises:
            ValueError: If ``values`` is empty or does not hold exactly
                ``degree + 1`` samples.
        """
        values = list(values)
        degree = validate_bootstrap_values(values, degree)
        diagonal = values
        for k in range(1, degree + 1):
            for j in range(degree, k - 1, -1):
                diagonal[j] = diagonal[j] - diagonal[j - 1]
        return cls(diagonal)

    @classmethod
    def from_polynomial(cls, polynomial: Polynomial, x0: Any, step: Any) -> DifferenceTable:
        """Bootstraps a table by evaluating ``polynomial`` at ``x0 .. x0 + d*h``."""
        points = bootstrap_points(x0, step, polynomial.degree + 1)
        return cls.from_values(polynomial.evaluate_many(points), degree=polynomial.degree)

    @property
    def degree(self) -> int:
        return len(self._diagonal) - 1

    @property
    def diagonal(self) -> tuple[Any, ...]:
        """Snapshot of ``D[0..d]``."""
        return tuple(self._diagonal)

    @property
    def current(self) -> Any:
        """``D[0]``, the polynomial value at the current position."""
        return self._diagonal[0]

    @property
    def top_difference(self) -> Any:
        """``D[d]``, the constant highest-order difference."""
        return self._diagonal[-1]

    def advance(self) -> None:
        """Moves the table from ``x`` to ``x + h`` in place.

        Uses ``Δ^k p(x + h) = Δ^k p(x) + Δ^(k+1) p(x)`` for ``k = 0..d-1``.
        Ascending order reads each ``D[k+1]`` before it is updated itself.
        """
        d = self._diagonal
        for k in range(len(d) - 1):
            d[k] = d[k] + d[k + 1]

    def copy(self) -> DifferenceTable:
        return type(self)(self._diagonal)

    def __len__(self) -> int:
        return len(self._diagonal)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DifferenceTable):
            return NotImplemented
        return self._diagonal == other._diagonal

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._diagonal!r})"
