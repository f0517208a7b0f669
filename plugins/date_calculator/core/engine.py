"""Calendar-day arithmetic for the date calculator.

Both operations work on whole calendar dates. Callers supply "today" from
their own clock; nothing here reads the system time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict

from common.errors import InvalidDatetimeError, InvalidInputError

ONE_DAY = timedelta(days=1)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DateLike = date | datetime | str


@dataclass(frozen=True, slots=True)
class DateDifference:
    from_date: date
    to_date: date
    days: int

    @property
    def label(self) -> str:
        return describe_day_difference(self.days)

    def to_dict(self) -> Dict[str, object]:
        return {
            "from_date": self.from_date.isoformat(),
            "to_date": self.to_date.isoformat(),
            "days": self.days,
            "label": self.label,
        }


@dataclass(frozen=True, slots=True)
class DateOffset:
    from_date: date
    days: int
    end_date: date

    def to_dict(self) -> Dict[str, object]:
        return {
            "from_date": self.from_date.isoformat(),
            "days": self.days,
            "end_date": self.end_date.isoformat(),
            "weekday": WEEKDAYS[self.end_date.weekday()],
        }


def as_date(value: DateLike) -> date:
    """Coerce ``value`` to a calendar date, dropping any time of day."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidDatetimeError(f"Invalid date '{value}'") from exc
    raise InvalidDatetimeError(f"Invalid date {value!r}")


def day_difference(from_date: DateLike, to_date: DateLike) -> int:
    """Whole days from ``from_date`` to ``to_date``; positive when later."""

    start = as_date(from_date)
    end = as_date(to_date)
    return round((end - start) / ONE_DAY)


def describe_day_difference(days: int) -> str:
    if days == 0:
        return "Same day"
    sign = "+" if days > 0 else ""
    suffix = "" if abs(days) == 1 else "s"
    return f"{sign}{days} day{suffix}"


def add_days(from_date: DateLike, days: int) -> date:
    """Move ``days`` calendar days from ``from_date`` (negative goes back)."""

    if isinstance(days, bool) or not isinstance(days, int):
        if isinstance(days, float) and days.is_integer():
            days = int(days)
        else:
            raise InvalidInputError(f"Day offset must be a whole number, got {days!r}")
    start = as_date(from_date)
    try:
        return start + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidDatetimeError(
            f"Moving {days} days from {start.isoformat()} leaves the supported calendar"
        ) from exc


def compute_difference(from_date: DateLike, to_date: DateLike) -> DateDifference:
    start = as_date(from_date)
    end = as_date(to_date)
    return DateDifference(from_date=start, to_date=end, days=day_difference(start, end))


def compute_offset(from_date: DateLike, days: int) -> DateOffset:
    start = as_date(from_date)
    end = add_days(start, days)
    return DateOffset(from_date=start, days=(end - start).days, end_date=end)


__all__ = [
    "DateDifference",
    "DateOffset",
    "as_date",
    "day_difference",
    "describe_day_difference",
    "add_days",
    "compute_difference",
    "compute_offset",
]
