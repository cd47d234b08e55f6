"""Chooses between direct evaluation and tabulation.

Tabulating ``n`` points of a degree-``d`` polynomial costs ``d + 1`` Horner
evaluations plus ``d * (d + 1) / 2`` subtractions of setup, then ``d``
additions per point. Direct evaluation costs ``d`` multiply-adds per point.
Where the two cross depends on how expensive ``*`` is compared with ``+``
for the numeric type in use (cheap for ``float``, growing with operand size
for Python ``int`` and ``Fraction``), so the decision is a tunable threshold
``f(d)``: tabulate when ``n > f(d)``.

The default ``f(d) = d + 1`` tabulates as soon as there is at least one
point beyond the bootstrap window.

Examples:
--------
>>> from tabkit.tabulation.strategy import StrategySelector
>>> StrategySelector().choose(degree=3, count=4)
'direct'
>>> StrategySelector().choose(degree=3, count=5)
'tabulate'
>>> StrategySelector(threshold=lambda d: 4 * d).choose(degree=3, count=5)
'direct'
"""

from __future__ import annotations

import operator
from typing import Callable

__all__ = [
    "DIRECT",
    "TABULATE",
    "default_threshold",
    "StrategySelector",
]

DIRECT = "direct"
TABULATE = "tabulate"


def default_threshold(degree: int) -> int:
    """Returns ``degree + 1``, the size of the bootstrap window."""
    return degree + 1


class StrategySelector:
    """Threshold policy deciding whether tabulation beats direct evaluation.

    The selector is advisory: callers can always force either path.

    Attributes:
        threshold: Callable ``f(d) -> int``. Tabulation is chosen when the
            number of points is strictly greater than ``f(d)``.
    """

    def __init__(self, threshold: Callable[[int], int] | int | None = None) -> None:
        """Initialises the selector.

        Args:
            threshold: One of

                * ``None``: use :func:`default_threshold`.
                * an ``int`` offset ``m``: use ``f(d) = d + 1 + m``.
                * a callable ``f(d) -> int``.

        Raises:
            TypeError: If ``threshold`` is neither ``None``, an integer nor
                callable.
        """
        if threshold is None:
            self.threshold = default_threshold
        elif callable(threshold):
            self.threshold = threshold
        else:
            try:
                offset = operator.index(threshold)
            except TypeError:
                raise TypeError(
                    "threshold must be None, an integer offset or a callable; "
                    f"got {type(threshold).__name__}."
                ) from None
            self.threshold = lambda degree: default_threshold(degree) + offset

    def should_tabulate(self, degree: int, count: int | None) -> bool:
        """Returns True if tabulating ``count`` points is the cheaper path.

        An unbounded sequence (``count is None``) is always tabulated.
        """
        if count is None:
            return True
        return count > self.threshold(degree)

    def choose(self, degree: int, count: int | None) -> str:
        """Returns ``"tabulate"`` or ``"direct"``."""
        return TABULATE if self.should_tabulate(degree, count) else DIRECT
