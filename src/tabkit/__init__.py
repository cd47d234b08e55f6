"""Provides all tabkit tools."""

from importlib.metadata import PackageNotFoundError, version

from tabkit.polynomial import Polynomial
from tabkit.tabulation.config import TabulationConfig
from tabkit.tabulation.difference_table import DifferenceTable
from tabkit.tabulation.direct import DirectEvaluator
from tabkit.tabulation.engines import available_methods, register_method
from tabkit.tabulation.sharded import tabulate_sharded
from tabkit.tabulation.strategy import StrategySelector
from tabkit.tabulation.tabulator import Tabulator
from tabkit.tabulation_kit import TabulationKit

try:
    __version__ = version("tabkit")
except PackageNotFoundError:
    pass

__all__ = [
    "DifferenceTable",
    "DirectEvaluator",
    "Polynomial",
    "StrategySelector",
    "TabulationConfig",
    "TabulationKit",
    "Tabulator",
    "available_methods",
    "register_method",
    "tabulate_sharded",
]
