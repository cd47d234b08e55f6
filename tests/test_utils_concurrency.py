"""Tests for tabkit.utils.concurrency."""

from __future__ import annotations

import contextvars
import threading

import pytest

from tabkit.utils.concurrency import cap_workers, normalize_workers, parallel_execute

_marker: contextvars.ContextVar[str] = contextvars.ContextVar("tabkit_test_marker", default="unset")


@pytest.mark.parametrize(
    "value, expected",
    [(None, 1), (0, 1), (-3, 1), (2.7, 2), ("4", 4), ("x", 1), (8, 8)],
)
def test_normalize_workers(value, expected):
    """normalize_workers coerces anything to a positive int."""
    assert normalize_workers(value) == expected


def test_cap_workers():
    """cap_workers never exceeds the task count and is at least one."""
    assert cap_workers(8, 3) == 3
    assert cap_workers(2, 10) == 2
    assert cap_workers(5, 0) == 1
    assert cap_workers(None, 10) == 1


def test_parallel_execute_serial_preserves_order():
    """Serial path returns results in argument order."""
    assert parallel_execute(lambda a, b: a * b, [(1, 2), (3, 4), (5, 6)]) == [2, 12, 30]


@pytest.mark.parallel
def test_parallel_execute_threads_preserve_order_and_context(extra_threads_ok):
    """Threaded path keeps order and copies the caller's context."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads in this environment")

    thread_ids = set()
    lock = threading.Lock()

    def worker(i):
        with lock:
            thread_ids.add(threading.get_ident())
        return i, _marker.get()

    token = _marker.set("caller")
    try:
        out = parallel_execute(worker, [(i,) for i in range(16)], n_workers=4)
    finally:
        _marker.reset(token)

    assert out == [(i, "caller") for i in range(16)]
    assert threading.get_ident() not in thread_ids
