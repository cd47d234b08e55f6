"""Validation utilities for tabkit."""

from __future__ import annotations

import operator
from typing import Any, Sequence

from tabkit.logger import tabkit_logger

__all__ = [
    "validate_coefficients",
    "validate_count",
    "validate_step",
    "validate_refresh_interval",
    "validate_bootstrap_values",
    "is_zero",
]


def validate_coefficients(coefficients: Any) -> tuple[Any, ...]:
    """Validates polynomial coefficients and returns them as a tuple.

    Args:
        coefficients: Ordered coefficients ``c0..cd`` (coefficient of
            ``x**k`` at index ``k``). Any iterable is accepted, including
            1D NumPy arrays.

    Returns:
        The coefficients as a tuple.

    Raises:
        ValueError: If the sequence is empty.
        TypeError: If ``coefficients`` is not iterable.
    """
    try:
        coeffs = tuple(coefficients)
    except TypeError:
        raise TypeError(
            f"coefficients must be an iterable; got {type(coefficients).__name__}."
        ) from None
    if not coeffs:
        raise ValueError("coefficients must be non-empty; a polynomial needs at least c0.")
    return coeffs


def validate_count(count: Any, *, allow_none: bool = False) -> int | None:
    """Validates a number of points to produce.

    Args:
        count: Requested number of points. Anything accepted by
            :func:`operator.index` (e.g. ``int`` or ``numpy.int64``).
        allow_none: If ``True``, ``None`` is passed through and means
            "unbounded".

    Returns:
        The count as a Python ``int`` (or ``None`` when allowed).

    Raises:
        TypeError: If ``count`` is not an integer.
        ValueError: If ``count`` is negative.
    """
    if count is None and allow_none:
        return None
    try:
        n = operator.index(count)
    except TypeError:
        raise TypeError(f"count must be an integer; got {type(count).__name__}.") from None
    if n < 0:
        raise ValueError(f"count must be non-negative; got {n}.")
    return n


def validate_step(step: Any, count: int | None, *, allow_zero_step: bool = False) -> None:
    """Checks that a progression with step ``step`` has distinct points.

    A zero step with more than one point means every sample coincides. That
    is rejected unless ``allow_zero_step`` is set, in which case a warning
    is logged and the caller gets the same value repeated.

    Args:
        step: Progression step ``h``.
        count: Number of points, or ``None`` for an unbounded sequence.
        allow_zero_step: Permit ``h == 0`` with a warning instead of raising.

    Raises:
        ValueError: If ``step == 0`` and more than one point is requested
            while ``allow_zero_step`` is ``False``.
    """
    if count is not None and count <= 1:
        return
    if not is_zero(step):
        return
    if not allow_zero_step:
        raise ValueError(
            "step must be non-zero when more than one point is requested; "
            "pass allow_zero_step=True to repeat a single point."
        )
    tabkit_logger.warning(
        "Tabulating with step == 0: all %s points coincide.",
        "unbounded" if count is None else count,
    )


def validate_refresh_interval(refresh_interval: Any) -> int | None:
    """Validates a difference-table refresh interval.

    Args:
        refresh_interval: ``None`` (never refresh) or a positive integer.

    Returns:
        The interval as an ``int``, or ``None``.

    Raises:
        TypeError: If the interval is not an integer.
        ValueError: If the interval is not positive.
    """
    if refresh_interval is None:
        return None
    try:
        k = operator.index(refresh_interval)
    except TypeError:
        raise TypeError(
            f"refresh_interval must be an integer or None; "
            f"got {type(refresh_interval).__name__}."
        ) from None
    if k < 1:
        raise ValueError(f"refresh_interval must be positive; got {k}.")
    return k


def validate_bootstrap_values(values: Sequence[Any], degree: int | None) -> int:
    """Checks the number of bootstrap samples for a difference table.

    Args:
        values: Samples ``p(x0), p(x0 + h), ..., p(x0 + d*h)``.
        degree: Expected polynomial degree ``d``, or ``None`` to infer it
            as ``len(values) - 1``.

    Returns:
        The degree ``d``.

    Raises:
        ValueError: If there are no samples, or the number of samples is
            not ``degree + 1``.
    """
    n_values = len(values)
    if n_values == 0:
        raise ValueError("at least one bootstrap value is required to build a difference table.")
    if degree is None:
        return n_values - 1
    d = operator.index(degree)
    if d < 0:
        raise ValueError(f"degree must be non-negative; got {d}.")
    if n_values < d + 1:
        raise ValueError(
            f"a degree-{d} difference table needs {d + 1} bootstrap values; got {n_values}."
        )
    if n_values > d + 1:
        raise ValueError(
            f"a degree-{d} difference table takes exactly {d + 1} bootstrap values; "
            f"got {n_values}."
        )
    return d


def is_zero(value: Any) -> bool:
    """Returns True if ``value`` compares equal to zero.

    Non-scalar values (e.g. NumPy arrays) count as zero only when every
    entry is zero.
    """
    result = value == 0
    if isinstance(result, bool):
        return result
    all_ = getattr(result, "all", None)
    if all_ is not None:
        return bool(all_())
    return bool(result)
