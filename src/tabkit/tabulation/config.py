"""Configuration for polynomial tabulation.

This config controls how :class:`~tabkit.tabulation_kit.TabulationKit`
picks an evaluation path, how often the tabulator rebuilds its difference
table, and whether a zero progression step is accepted.
"""

from __future__ import annotations

from typing import Callable

from tabkit.tabulation.strategy import StrategySelector
from tabkit.utils.validate import validate_refresh_interval


class TabulationConfig:
    """Configuration for polynomial tabulation.

    This config controls how :class:`~tabkit.tabulation_kit.TabulationKit`
    picks an evaluation path, how often the tabulator rebuilds its
    difference table, and whether a zero progression step is accepted.
    """

    def __init__(
        self,
        method: str = "auto",
        threshold: Callable[[int], int] | int | None = None,
        refresh_interval: int | None = None,
        allow_zero_step: bool = False,
    ):
        """Initialize configuration.

        Args:
            method:
                Default evaluation method name. ``"auto"`` lets the
                strategy selector decide per request; ``"direct"`` and
                ``"tabulate"`` force a path. Any registered method name or
                alias is accepted.

            threshold:
                Crossover policy for ``"auto"``. Tabulation is used when
                the number of points exceeds ``f(d)``.

                - ``None``: ``f(d) = d + 1``.
                - ``int`` offset ``m``: ``f(d) = d + 1 + m``. Raise it for
                  numeric types where addition is not much cheaper than
                  multiplication.
                - callable ``f(d) -> int``.

            refresh_interval:
                If set, the tabulator rebuilds its difference table from
                fresh Horner evaluations after every ``refresh_interval``
                values. Floating-point rounding in the additive recurrence
                accumulates from step to step; a refresh resets it at the
                cost of ``d + 1`` direct evaluations. ``None`` never
                refreshes, which is right for exact types (``int``,
                ``Fraction``).

            allow_zero_step:
                If ``True``, a progression with ``step == 0`` and more than
                one point is tabulated (the same value repeated) with a
                logged warning. If ``False`` it raises ``ValueError``.

        """
        self.method = method
        self.threshold = threshold
        self.refresh_interval = validate_refresh_interval(refresh_interval)
        self.allow_zero_step = bool(allow_zero_step)
        self.selector = StrategySelector(threshold)

    def __repr__(self) -> str:
        return (
            f"TabulationConfig(method={self.method!r}, threshold={self.threshold!r}, "
            f"refresh_interval={self.refresh_interval!r}, "
            f"allow_zero_step={self.allow_zero_step!r})"
        )
