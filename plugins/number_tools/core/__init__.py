"""Exports for the number tools core."""

from .engine import (
    NumberComparison,
    PercentAdjustment,
    adjust_by_percent,
    compare_numbers,
    compute_adjustment,
    percent_difference,
)

MODES = ("Compare two numbers", "Number up/down by %")

__all__ = [
    "MODES",
    "NumberComparison",
    "PercentAdjustment",
    "adjust_by_percent",
    "compare_numbers",
    "compute_adjustment",
    "percent_difference",
]
