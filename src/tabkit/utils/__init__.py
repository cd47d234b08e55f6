"""Utility functions for tabkit package."""

from .numerics import (
    as_value_array,
    expected_top_difference,
)

__all__ = [
    "as_value_array",
    "expected_top_difference",
]
