"""Tests for the tabulation method registry."""

from __future__ import annotations

import logging

import pytest

import tabkit.tabulation.engines as engines
from tabkit.polynomial import Polynomial
from tabkit.tabulation.config import TabulationConfig
from tabkit.tabulation.direct import DirectEvaluator
from tabkit.tabulation.tabulator import Tabulator


@pytest.fixture
def restore_registry(monkeypatch):
    """Keeps registrations made by a test from leaking into others."""
    monkeypatch.setattr(engines, "_METHOD_SPECS", list(engines._METHOD_SPECS))
    engines._method_maps.cache_clear()
    yield
    engines._method_maps.cache_clear()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("direct", engines.direct_engine),
        ("Horner", engines.direct_engine),
        ("tabulate", engines.tabulate_engine),
        ("forward-difference", engines.tabulate_engine),
        ("Forward Difference", engines.tabulate_engine),
        ("FD", engines.tabulate_engine),
        ("auto", engines.auto_engine),
    ],
)
def test_resolve_method_aliases(name, expected):
    """Tests case/punctuation insensitive name resolution."""
    assert engines.resolve_method(name) is expected


def test_unknown_method_lists_choices():
    """Tests the error message for an unknown method."""
    with pytest.raises(ValueError, match=r"Choose one of \{auto, direct, tabulate\}"):
        engines.resolve_method("spline")


def test_available_methods():
    """Tests canonical names."""
    assert engines.available_methods() == ["auto", "direct", "tabulate"]


def test_engines_return_expected_iterators():
    """Tests the concrete iterator type behind each forced method."""
    p = Polynomial([0, 0, 1])
    cfg = TabulationConfig()
    assert isinstance(engines.direct_engine(p, 0, 1, 6, cfg), DirectEvaluator)
    assert isinstance(engines.tabulate_engine(p, 0, 1, 6, cfg), Tabulator)


def test_tabulate_engine_uses_refresh_interval():
    """Tests that the config's refresh interval reaches the tabulator."""
    t = engines.tabulate_engine(Polynomial([1, 2]), 0, 1, 5, TabulationConfig(refresh_interval=2))
    assert t.refresh_interval == 2


@pytest.mark.parametrize(
    "count, expected_type",
    [(3, DirectEvaluator), (4, Tabulator), (None, Tabulator)],
)
def test_auto_engine_follows_selector(count, expected_type, caplog):
    """Tests that auto delegates per the strategy selector and logs the decision."""
    p = Polynomial([1, 2, 3])
    with caplog.at_level(logging.INFO, logger="tabkit"):
        it = engines.auto_engine(p, 0, 1, count, TabulationConfig())
    assert isinstance(it, expected_type)
    assert any("Strategy selector chose" in r.getMessage() for r in caplog.records)


def test_register_method(restore_registry):
    """Tests registering a new engine with aliases."""
    def squares_only(polynomial, x0, step, count, config):
        return iter([x0 * x0] * count)

    engines.register_method("squares", squares_only, aliases=("sq",))
    assert engines.resolve_method("SQ") is squares_only
    assert "squares" in engines.available_methods()


def test_register_non_callable_rejected(restore_registry):
    """Tests that engines must be callable."""
    with pytest.raises(TypeError):
        engines.register_method("broken", 42)
