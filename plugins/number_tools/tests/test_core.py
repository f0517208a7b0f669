import pytest

from plugins.number_tools.core import (
    MODES,
    adjust_by_percent,
    compare_numbers,
    compute_adjustment,
    percent_difference,
)


def test_compare_numbers():
    result = compare_numbers(200, 205)
    assert result.diff == 5
    assert result.percent == pytest.approx(2.5)
    assert result.to_dict()["percent_display"] == "2.50%"
    assert result.to_dict()["diff_display"] == "5.00"


def test_compare_decrease():
    result = compare_numbers(80, 60)
    assert result.diff == -20
    assert result.percent == pytest.approx(-25)


def test_compare_from_zero_reports_zero_percent():
    result = compare_numbers(0, 5)
    assert result.diff == 5
    assert result.percent == 0
    assert percent_difference(0, -3) == 0


@pytest.mark.parametrize(
    "base, percent, expected",
    [(200, 10, 220), (200, -10, 180), (50, 0, 50), (0, 75, 0), (80, -100, 0)],
)
def test_adjust_by_percent(base, percent, expected):
    assert adjust_by_percent(base, percent) == pytest.approx(expected)


def test_adjustment_display():
    result = compute_adjustment(200, 10)
    assert result.to_dict()["result_display"] == "220.00"


def test_modes():
    assert MODES == ("Compare two numbers", "Number up/down by %")
