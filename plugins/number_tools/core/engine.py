"""Relations between plain numbers: differences and percentage changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from common.formatting import format_fixed


@dataclass(frozen=True, slots=True)
class NumberComparison:
    first: float
    second: float
    diff: float
    percent: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "first": self.first,
            "second": self.second,
            "diff": self.diff,
            "percent": self.percent,
            "diff_display": format_fixed(self.diff),
            "percent_display": f"{format_fixed(self.percent)}%",
        }


@dataclass(frozen=True, slots=True)
class PercentAdjustment:
    base: float
    percent: float
    result: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "base": self.base,
            "percent": self.percent,
            "result": self.result,
            "result_display": format_fixed(self.result),
        }


def percent_difference(first: float, diff: float) -> float:
    # A zero first operand reports 0% instead of an infinite change.
    if first == 0:
        return 0.0
    return diff / first * 100


def compare_numbers(first: float, second: float) -> NumberComparison:
    """Compare ``second`` against ``first``.

    ``diff`` is ``second - first`` and ``percent`` expresses it relative to
    ``first``. Inputs must already be finite.
    """

    diff = second - first
    return NumberComparison(
        first=first,
        second=second,
        diff=diff,
        percent=percent_difference(first, diff),
    )


def adjust_by_percent(base: float, percent: float) -> float:
    """Raise (or lower, for negative ``percent``) ``base`` by ``percent`` %."""

    return base * (1 + percent / 100)


def compute_adjustment(base: float, percent: float) -> PercentAdjustment:
    return PercentAdjustment(base=base, percent=percent, result=adjust_by_percent(base, percent))


__all__ = [
    "NumberComparison",
    "PercentAdjustment",
    "percent_difference",
    "compare_numbers",
    "adjust_by_percent",
    "compute_adjustment",
]
