"""Exports for the date calculator core."""

from .engine import (
    DateDifference,
    DateOffset,
    add_days,
    as_date,
    compute_difference,
    compute_offset,
    day_difference,
    describe_day_difference,
)

MODES = ("Pick end date", "Add or subtract days")

__all__ = [
    "MODES",
    "DateDifference",
    "DateOffset",
    "add_days",
    "as_date",
    "compute_difference",
    "compute_offset",
    "day_difference",
    "describe_day_difference",
]
