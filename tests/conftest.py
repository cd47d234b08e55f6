"""Pytest configuration file with fixtures shared across the tabkit tests."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError
from fractions import Fraction

import numpy as np
import pytest

import tabkit.tabulation.sharded as sharded

__all__ = ["extra_threads_ok", "rng"]


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


@pytest.fixture
def rng():
    """Seeded NumPy generator so random coefficients are reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture
def int_coefficients(rng):
    """Factory for random integer coefficient lists of a given degree."""
    def _make(degree: int) -> list[int]:
        return [int(c) for c in rng.integers(-9, 10, size=degree + 1)]
    return _make


@pytest.fixture
def fraction_coefficients(rng):
    """Factory for random Fraction coefficient lists of a given degree."""
    def _make(degree: int) -> list[Fraction]:
        nums = rng.integers(-9, 10, size=degree + 1)
        dens = rng.integers(1, 7, size=degree + 1)
        return [Fraction(int(n), int(d)) for n, d in zip(nums, dens)]
    return _make


# --- default to serial sharding unless test opts in via @pytest.mark.parallel ---
@pytest.fixture(autouse=True)
def _serial_by_default(request, monkeypatch):
    """Force n_workers=1 in sharded tabulation unless test is marked @pytest.mark.parallel."""
    if request.node.get_closest_marker("parallel"):
        return  # allow the test to exercise true parallel behavior

    orig = sharded.parallel_execute

    def _wrapped(worker, arg_tuples, **kwargs):
        kwargs["n_workers"] = 1
        return orig(worker, arg_tuples, **kwargs)

    monkeypatch.setattr(sharded, "parallel_execute", _wrapped, raising=True)
