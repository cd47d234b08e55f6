"""Provides the Tabulator class.

The tabulator steps a :class:`DifferenceTable` along an arithmetic
progression and emits one polynomial value per step, using ``d`` additions
and no multiplication. The method is "tabulating polynomial values" from
section 4.6.4 of Knuth's *The Art of Computer Programming*.

Examples:
--------
Squares of ``0, 1, ..., 5``:

>>> from tabkit.polynomial import Polynomial
>>> from tabkit.tabulation.tabulator import Tabulator
>>> p = Polynomial([0, 0, 1])
>>> list(Tabulator.from_polynomial(p, x0=0, step=1, count=6))
[0, 1, 4, 9, 16, 25]

Pairs of points and values, with floating-point drift bounded by a
periodic rebuild of the table:

>>> t = Tabulator.from_polynomial(
...     Polynomial([3.0, 2.0]), x0=5.0, step=2.0, count=4, refresh_interval=2
... )
>>> list(t.points())
[(5.0, 13.0), (7.0, 17.0), (9.0, 21.0), (11.0, 25.0)]
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from tabkit.logger import tabkit_logger
from tabkit.polynomial import Polynomial
from tabkit.tabulation.difference_table import DifferenceTable
from tabkit.utils.validate import (
    validate_count,
    validate_refresh_interval,
    validate_step,
)

__all__ = ["Tabulator"]


class Tabulator:
    """Lazy, forward-only iterator over tabulated polynomial values.

    The tabulator owns a private copy of the difference table it is given,
    so stepping never mutates the caller's table. ``D[0]`` always holds the
    value at the current, not yet emitted point.

    With ``count=None`` the sequence is unbounded; otherwise iteration stops
    after ``count`` values. A tabulator cannot be restarted: build a new one
    to replay the sequence.

    Attributes:
        count: Total number of values to emit, or ``None`` for unbounded.
        x0: First point of the progression, if known.
        step: Progression step, if known.
        polynomial: The tabulated polynomial, if known. Required for
            refreshing.
        refresh_interval: Rebuild the table from direct evaluations every
            this many emitted values, or ``None`` to never refresh.
    """

    def __init__(
        self,
        table: DifferenceTable,
        count: int | None = None,
        *,
        x0: Any = None,
        step: Any = None,
        polynomial: Polynomial | None = None,
        refresh_interval: int | None = None,
    ) -> None:
        """Initialises the tabulator from a difference table.

        Args:
            table: Difference table positioned at the first point to emit.
                It is copied.
            count: Number of values to emit, or ``None`` for unbounded.
            x0: First point of the progression. Needed for :attr:`position`,
                :meth:`points` and refreshing.
            step: Progression step. Needed for :attr:`position`,
                :meth:`points` and refreshing.
            polynomial: The tabulated polynomial. Needed for refreshing.
            refresh_interval: Positive number of values between table
                rebuilds, or ``None``.

        Raises:
            ValueError: If ``table`` is empty, ``count`` is negative, or a
                refresh is requested without the polynomial and progression.
        """
        if len(table) == 0:
            raise ValueError("cannot tabulate from an empty difference table.")
        self.count = validate_count(count, allow_none=True)
        self.refresh_interval = validate_refresh_interval(refresh_interval)
        if self.refresh_interval is not None and (
            polynomial is None or x0 is None or step is None
        ):
            raise ValueError("refresh_interval requires polynomial, x0 and step.")
        if polynomial is not None and polynomial.degree != table.degree:
            raise ValueError(
                f"polynomial degree {polynomial.degree} does not match "
                f"table degree {table.degree}."
            )

        self.x0 = x0
        self.step = step
        self.polynomial = polynomial
        self._table = table.copy()
        self._index = 0

    @classmethod
    def from_polynomial(
        cls,
        polynomial: Polynomial,
        x0: Any,
        step: Any,
        count: int | None = None,
        *,
        refresh_interval: int | None = None,
        allow_zero_step: bool = False,
    ) -> Tabulator:
        """Bootstraps a tabulator for ``polynomial`` over ``x0, x0 + h, ...``.

        Evaluates the first ``d + 1`` points with Horner's rule and builds
        the difference table from them.

        Args:
            polynomial: Polynomial to tabulate.
            x0: First point.
            step: Progression step ``h``.
            count: Number of values, or ``None`` for unbounded.
            refresh_interval: Values between table rebuilds, or ``None``.
            allow_zero_step: Permit ``step == 0`` (with a warning).

        Returns:
            A tabulator positioned at ``x0``.

        Raises:
            ValueError: If ``step == 0`` with more than one point and
                ``allow_zero_step`` is ``False``.
        """
        count = validate_count(count, allow_none=True)
        validate_step(step, count, allow_zero_step=allow_zero_step)
        table = DifferenceTable.from_polynomial(polynomial, x0, step)
        return cls(
            table,
            count,
            x0=x0,
            step=step,
            polynomial=polynomial,
            refresh_interval=refresh_interval,
        )

    @property
    def degree(self) -> int:
        return self._table.degree

    @property
    def index(self) -> int:
        """Number of values emitted so far."""
        return self._index

    @property
    def remaining(self) -> int | None:
        """Number of values left, or ``None`` when unbounded."""
        if self.count is None:
            return None
        return self.count - self._index

    @property
    def table(self) -> DifferenceTable:
        """Copy of the current difference table."""
        return self._table.copy()

    @property
    def position(self) -> Any:
        """The current, not yet emitted point ``x0 + index * h``."""
        if self.x0 is None or self.step is None:
            raise ValueError("position is unknown: tabulator was built without x0 and step.")
        return self.x0 + self._index * self.step

    def __iter__(self) -> Tabulator:
        return self

    def __next__(self) -> Any:
        if self.count is not None and self._index >= self.count:
            raise StopIteration
        result = self._table.current
        self._index += 1
        exhausted = self.count is not None and self._index >= self.count
        if (
            self.refresh_interval is not None
            and not exhausted
            and self._index % self.refresh_interval == 0
        ):
            self._refresh()
        else:
            self._table.advance()
        return result

    def points(self) -> Iterator[tuple[Any, Any]]:
        """Yields ``(x, p(x))`` pairs for the remaining values."""
        while self.count is None or self._index < self.count:
            x = self.position
            yield x, next(self)

    def _refresh(self) -> None:
        """Rebuilds the table from direct evaluations at the next point."""
        stepped = self._table
        stepped.advance()
        fresh = DifferenceTable.from_polynomial(self.polynomial, self.position, self.step)
        if tabkit_logger.isEnabledFor(logging.DEBUG):
            tabkit_logger.debug(
                "Refreshed difference table at index %d; value drift %r.",
                self._index,
                stepped.current - fresh.current,
            )
        self._table = fresh

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(degree={self.degree}, index={self._index}, "
            f"count={self.count})"
        )
