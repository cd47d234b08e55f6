"""Provides the TabulationKit API.

This class is a lightweight front end over tabkit's evaluation engines.
You provide the polynomial coefficients, then request values along an
arithmetic progression ``x0, x0 + step, ...``, optionally choosing an
engine by name (``"auto"``, ``"direct"`` or ``"tabulate"``).

Coefficients are given in ascending order of degree: index ``k`` holds the
coefficient of ``x**k``.

Examples:
    Squares via forward differences:

        >>> from tabkit.tabulation_kit import TabulationKit
        >>> tk = TabulationKit([0, 0, 1])
        >>> tk.values(x0=0, step=1, count=6)
        [0, 1, 4, 9, 16, 25]

    A lazy sequence, forcing the tabulation path:

        >>> it = TabulationKit([3, 2]).tabulate(5, 2, 4, method="tabulate")
        >>> next(it), next(it)
        (13, 17)

    Floating-point values as a NumPy array, with periodic table refresh:

        >>> from tabkit.tabulation.config import TabulationConfig
        >>> tk = TabulationKit([0.5, -1.0, 0.25], config=TabulationConfig(refresh_interval=64))
        >>> tk.values(0.0, 0.1, 1000, as_array=True).shape
        (1000,)

Notes:
    - Method names are case/spacing/punctuation insensitive.
    - New engines can be added with
      :func:`tabkit.tabulation.engines.register_method`.
"""

from __future__ import annotations

from typing import Any, Iterator

from numpy.typing import NDArray

from tabkit.polynomial import Polynomial
from tabkit.tabulation.config import TabulationConfig
from tabkit.tabulation.engines import resolve_method
from tabkit.tabulation.sharded import tabulate_sharded
from tabkit.utils.numerics import as_value_array
from tabkit.utils.types import Coefficients
from tabkit.utils.validate import validate_count


class TabulationKit:
    """Unified interface for evaluating a polynomial along a progression.

    By default the ``"auto"`` method is used: the strategy selector picks
    tabulation when there are more points than the threshold ``f(d)``
    (``d + 1`` unless configured otherwise) and direct evaluation otherwise.

    Attributes:
        polynomial: The :class:`Polynomial` being evaluated.
        config: Active :class:`TabulationConfig`.
    """

    def __init__(
        self,
        coefficients: Coefficients | Polynomial,
        config: TabulationConfig | None = None,
    ):
        """Initializes the kit with a polynomial and an optional configuration.

        Args:
            coefficients: Ascending-order coefficients ``c0..cd``, or an
                existing :class:`Polynomial`.
            config: Tabulation configuration. Defaults to
                ``TabulationConfig()``.

        Raises:
            ValueError: If ``coefficients`` is empty.
        """
        if isinstance(coefficients, Polynomial):
            self.polynomial = coefficients
        else:
            self.polynomial = Polynomial(coefficients)
        self.config = config or TabulationConfig()

    @property
    def degree(self) -> int:
        return self.polynomial.degree

    def evaluate(self, x: Any) -> Any:
        """Evaluates the polynomial at a single point with Horner's rule."""
        return self.polynomial.evaluate(x)

    def tabulate(
        self,
        x0: Any,
        step: Any,
        count: int | None,
        *,
        method: str | None = None,
    ) -> Iterator[Any]:
        """Returns a lazy iterator over ``p(x0 + i * step)`` for ``i < count``.

        Args:
            x0: First point.
            step: Progression step. Must be non-zero when ``count > 1``
                unless the config allows a zero step.
            count: Number of values, or ``None`` for an unbounded sequence.
            method: Method name or alias (e.g. ``"auto"``, ``"direct"``,
                ``"tabulate"``). Defaults to ``config.method``.

        Returns:
            A forward-only iterator. It is exhausted after ``count`` values.

        Raises:
            ValueError: If ``method`` is not recognized, ``count`` is
                negative, or the step is zero and not allowed.
        """
        engine = resolve_method(method or self.config.method)
        count = validate_count(count, allow_none=True)
        return engine(self.polynomial, x0, step, count, self.config)

    def values(
        self,
        x0: Any,
        step: Any,
        count: int,
        *,
        method: str | None = None,
        n_workers: int = 1,
        as_array: bool = False,
    ) -> list[Any] | NDArray:
        """Returns ``count`` values along the progression, materialized.

        Args:
            x0: First point.
            step: Progression step.
            count: Number of values.
            method: Method name or alias. Defaults to ``config.method``.
            n_workers: Number of threads. With more than one, the points are
                split into contiguous shards that each bootstrap their own
                difference table.
            as_array: If ``True``, return a NumPy array instead of a list.

        Returns:
            The values, as a list or a 1D NumPy array.

        Raises:
            ValueError: If ``method`` is not recognized, ``count`` is
                negative, or the step is zero and not allowed.
        """
        vals = tabulate_sharded(
            self.polynomial,
            x0,
            step,
            count,
            n_workers=n_workers,
            method=method,
            config=self.config,
        )
        if as_array:
            return as_value_array(vals)
        return vals

    def points(
        self,
        x0: Any,
        step: Any,
        count: int | None,
        *,
        method: str | None = None,
    ) -> Iterator[tuple[Any, Any]]:
        """Returns a lazy iterator over ``(x, p(x))`` pairs."""
        it = self.tabulate(x0, step, count, method=method)
        points = getattr(it, "points", None)
        if points is not None:
            return points()
        return _pair_with_points(it, x0, step)


def _pair_with_points(values: Iterator[Any], x0: Any, step: Any) -> Iterator[tuple[Any, Any]]:
    """Pairs an engine's values with their progression points."""
    x = x0
    for v in values:
        yield x, v
        x = x + step
