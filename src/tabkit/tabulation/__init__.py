"""Forward-difference tabulation engine."""

from tabkit.tabulation.config import TabulationConfig
from tabkit.tabulation.difference_table import DifferenceTable
from tabkit.tabulation.direct import DirectEvaluator
from tabkit.tabulation.engines import available_methods, register_method
from tabkit.tabulation.sharded import tabulate_sharded
from tabkit.tabulation.strategy import StrategySelector, default_threshold
from tabkit.tabulation.tabulator import Tabulator

__all__ = [
    "DifferenceTable",
    "DirectEvaluator",
    "StrategySelector",
    "TabulationConfig",
    "Tabulator",
    "available_methods",
    "default_threshold",
    "register_method",
    "tabulate_sharded",
]
