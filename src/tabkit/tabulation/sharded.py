"""Sharded tabulation across threads.

The points ``0 .. count-1`` are split into contiguous shards. Every shard
bootstraps its own difference table at ``x0 + start * h``; tables are never
shared, since each step mutates the whole diagonal. Results are concatenated
in progression order.
"""

from __future__ import annotations

from typing import Any

from tabkit.polynomial import Polynomial
from tabkit.tabulation.config import TabulationConfig
from tabkit.tabulation.engines import resolve_method
from tabkit.utils.concurrency import cap_workers, parallel_execute
from tabkit.utils.validate import is_zero, validate_count

__all__ = [
    "shard_bounds",
    "tabulate_sharded",
]


def shard_bounds(count: int, n_shards: int) -> list[tuple[int, int]]:
    """Splits ``range(count)`` into ``n_shards`` contiguous ``(start, length)`` blocks.

    Block lengths differ by at most one, longer blocks first. Empty blocks
    are omitted.
    """
    n_shards = max(1, n_shards)
    base, extra = divmod(count, n_shards)
    bounds = []
    start = 0
    for i in range(n_shards):
        length = base + (1 if i < extra else 0)
        if length == 0:
            continue
        bounds.append((start, length))
        start += length
    return bounds


def tabulate_sharded(
    polynomial: Polynomial,
    x0: Any,
    step: Any,
    count: int,
    *,
    n_workers: int = 1,
    method: str | None = None,
    config: TabulationConfig | None = None,
) -> list[Any]:
    """Evaluates ``polynomial`` at ``count`` progression points on a thread pool.

    Args:
        polynomial: Polynomial to evaluate.
        x0: First point.
        step: Progression step ``h``.
        count: Number of points.
        n_workers: Number of threads. Capped by ``count``; ``<= 1`` runs
            serially.
        method: Method name for every shard. Defaults to ``config.method``.
            With ``"auto"`` the strategy is decided per shard, since each
            shard pays its own bootstrap cost.
        config: Tabulation configuration. Defaults to ``TabulationConfig()``.

    Returns:
        List of ``count`` values in progression order.

    Raises:
        ValueError: If ``count`` is negative, the method is unknown, or the
            step is zero and not allowed.
    """
    config = config or TabulationConfig()
    count = validate_count(count)
    engine = resolve_method(method or config.method)

    n_shards = cap_workers(n_workers, count)
    if is_zero(step):
        # every point coincides; the engine rejects or warns once
        n_shards = 1

    def run_shard(start: int, length: int) -> list[Any]:
        shard_x0 = x0 + start * step
        return list(engine(polynomial, shard_x0, step, length, config))

    if n_shards == 1:
        return run_shard(0, count) if count else []

    chunks = parallel_execute(
        run_shard,
        shard_bounds(count, n_shards),
        n_workers=n_shards,
    )
    values: list[Any] = []
    for chunk in chunks:
        values.extend(chunk)
    return values
