"""Concurrency management for sharded tabulation."""

from __future__ import annotations

import contextvars
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence, Tuple

__all__ = [
    "parallel_execute",
    "normalize_workers",
    "cap_workers",
]


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, preserving order.

    Each task runs in a copy of the calling context, so context variables
    set by the caller are visible inside ``worker``.

    Args:
        worker: Callable executed once per argument tuple.
        arg_tuples: Positional arguments for each call.
        n_workers: Number of threads. Values ``<= 1`` run serially.

    Returns:
        The results of each call, in the order of ``arg_tuples``.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).

    Raises:
        None: Invalid inputs are coerced to 1.
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def cap_workers(n_workers: Any, n_tasks: int) -> int:
    """Cap workers by number of tasks; ensure at least 1."""
    n = normalize_workers(n_workers)
    if n_tasks <= 0:
        return 1
    return max(1, min(n, int(n_tasks)))
