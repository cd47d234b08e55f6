"""Evaluation engines and the method registry.

An engine turns a polynomial and a progression ``(x0, step, count)`` into a
lazy iterator of values. Three are built in:

* ``"direct"``: Horner's rule at every point (:class:`DirectEvaluator`).
* ``"tabulate"``: forward differences (:class:`Tabulator`).
* ``"auto"``: asks the configured :class:`StrategySelector` which of the two
  to use.

Adding methods
--------------
New engines can be registered without modifying this module by calling
``register_method``:

    >>> from tabkit.tabulation.direct import DirectEvaluator
    >>> from tabkit.tabulation.engines import register_method
    >>> def reversed_direct(polynomial, x0, step, count, config):
    ...     return DirectEvaluator(polynomial, x0 + (count - 1) * step, -step, count)
    >>> register_method("reversed", reversed_direct, aliases=("rev",))  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive; aliases like
      ``"forward-difference"`` or ``"horner"`` are supported.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping, Protocol

from tabkit.logger import tabkit_logger
from tabkit.polynomial import Polynomial
from tabkit.tabulation.direct import DirectEvaluator
from tabkit.tabulation.strategy import TABULATE
from tabkit.tabulation.tabulator import Tabulator

if TYPE_CHECKING:
    from tabkit.tabulation.config import TabulationConfig

__all__ = [
    "TabulationEngine",
    "direct_engine",
    "tabulate_engine",
    "auto_engine",
    "register_method",
    "resolve_method",
    "available_methods",
]


class TabulationEngine(Protocol):
    """Protocol each evaluation engine must satisfy.

    An engine is any callable taking the polynomial, the progression and the
    active :class:`TabulationConfig`, and returning an iterator over exactly
    ``count`` values (or an unbounded iterator when ``count`` is ``None``).
    """
    def __call__(
        self,
        polynomial: Polynomial,
        x0: Any,
        step: Any,
        count: int | None,
        config: TabulationConfig,
    ) -> Iterator[Any]:
        """Return a lazy iterator over ``p(x0 + i * step)``."""
        ...


def direct_engine(
    polynomial: Polynomial,
    x0: Any,
    step: Any,
    count: int | None,
    config: TabulationConfig,
) -> DirectEvaluator:
    """Evaluates every point with Horner's rule."""
    return DirectEvaluator(
        polynomial, x0, step, count, allow_zero_step=config.allow_zero_step
    )


def tabulate_engine(
    polynomial: Polynomial,
    x0: Any,
    step: Any,
    count: int | None,
    config: TabulationConfig,
) -> Tabulator:
    """Steps a forward-difference table."""
    return Tabulator.from_polynomial(
        polynomial,
        x0,
        step,
        count,
        refresh_interval=config.refresh_interval,
        allow_zero_step=config.allow_zero_step,
    )


def auto_engine(
    polynomial: Polynomial,
    x0: Any,
    step: Any,
    count: int | None,
    config: TabulationConfig,
) -> Iterator[Any]:
    """Lets the strategy selector pick between tabulation and direct evaluation."""
    choice = config.selector.choose(polynomial.degree, count)
    tabkit_logger.info(
        "Strategy selector chose %r for degree %d and %s points.",
        choice,
        polynomial.degree,
        "unbounded" if count is None else count,
    )
    if choice == TABULATE:
        return tabulate_engine(polynomial, x0, step, count, config)
    return direct_engine(polynomial, x0, step, count, config)


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, TabulationEngine, list[str]]] = [
    ("auto", auto_engine, ["automatic", "strategy"]),
    ("direct", direct_engine, ["horner", "naive"]),
    ("tabulate", tabulate_engine, ["forward-difference", "forward_difference", "difference", "fd"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, TabulationEngine], tuple[str, ...]]:
    """Construct and cache lookup tables for evaluation methods.

    Links user-provided method names (and their aliases) to engines and
    records the canonical names used in error messages. The result is cached
    until ``register_method`` clears it.

    Returns:
        A pair ``(method_map, canonical_names)``.
    """
    method_map: dict[str, TabulationEngine] = {}
    canonical: set[str] = set()
    for name, engine, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = engine
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = engine
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    engine: TabulationEngine,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new evaluation method.

    Adds an engine that can be referenced by name in
    :class:`~tabkit.tabulation_kit.TabulationKit`. Registering a name that
    already exists replaces the earlier engine.

    Args:
        name: Canonical public name of the method.
        engine: Callable implementing the :class:`TabulationEngine` protocol.
        aliases: Additional accepted spellings.
    """
    if not callable(engine):
        raise TypeError(f"engine for method {name!r} must be callable.")
    _METHOD_SPECS.append((name, engine, list(aliases)))
    _method_maps.cache_clear()


def resolve_method(method: str) -> TabulationEngine:
    """Resolve a user-provided method name or alias to an engine.

    Args:
        method: User-provided method name or alias.

    Returns:
        The corresponding engine.

    Raises:
        ValueError: If the name is not registered.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown tabulation method '{method}'. Choose one of {{{opts}}}.") from None


def available_methods() -> list[str]:
    """List canonical method names.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)
