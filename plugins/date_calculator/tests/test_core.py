from datetime import date, datetime

import pytest

from common.errors import InvalidDatetimeError, InvalidInputError
from plugins.date_calculator.core import (
    MODES,
    add_days,
    as_date,
    compute_difference,
    compute_offset,
    day_difference,
    describe_day_difference,
)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2024-03-10", "2024-03-10", 0),
        ("2024-03-10", "2024-03-11", 1),
        ("2024-03-11", "2024-03-08", -3),
        ("2024-01-01", "2024-12-31", 365),
        ("2023-02-28", "2023-03-01", 1),
        ("2024-02-28", "2024-03-01", 2),
    ],
)
def test_day_difference(start, end, expected):
    assert day_difference(start, end) == expected


def test_day_difference_ignores_time_of_day():
    assert day_difference(datetime(2024, 3, 10, 23, 59), datetime(2024, 3, 11, 0, 1)) == 1


@pytest.mark.parametrize(
    "days, label",
    [(0, "Same day"), (1, "+1 day"), (-1, "-1 day"), (-3, "-3 days"), (45, "+45 days")],
)
def test_describe_day_difference(days, label):
    assert describe_day_difference(days) == label


def test_add_days_crosses_months_and_years():
    assert add_days(date(2024, 1, 31), 30) == date(2024, 3, 1)
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)
    assert add_days(date(2023, 12, 31), 1) == date(2024, 1, 1)
    assert add_days("2024-03-01", -1) == date(2024, 2, 29)
    assert add_days("2024-03-01", 0) == date(2024, 3, 1)


def test_add_days_accepts_integral_floats():
    assert add_days(date(2024, 1, 1), 2.0) == date(2024, 1, 3)


def test_add_days_rejects_fractions():
    with pytest.raises(InvalidInputError):
        add_days(date(2024, 1, 1), 1.5)


def test_add_days_outside_calendar():
    with pytest.raises(InvalidDatetimeError):
        add_days(date(9999, 12, 31), 1)
    with pytest.raises(InvalidDatetimeError):
        add_days(date(1, 1, 1), -1)


@pytest.mark.parametrize("value", ["", "2024-02-30", "soon", None])
def test_as_date_rejects_invalid_values(value):
    with pytest.raises(InvalidDatetimeError):
        as_date(value)


def test_as_date_accepts_datetime_strings():
    assert as_date("2024-05-06T12:30:00") == date(2024, 5, 6)


def test_compute_difference_payload():
    result = compute_difference("2024-03-10", "2024-03-11")
    assert result.to_dict() == {
        "from_date": "2024-03-10",
        "to_date": "2024-03-11",
        "days": 1,
        "label": "+1 day",
    }


def test_compute_offset_payload():
    result = compute_offset(date(2024, 1, 31), 30)
    assert result.end_date == date(2024, 3, 1)
    assert result.to_dict()["weekday"] == "Friday"
    assert result.to_dict()["end_date"] == "2024-03-01"


def test_modes():
    assert MODES[0] == "Pick end date"
    assert len(MODES) == 2
