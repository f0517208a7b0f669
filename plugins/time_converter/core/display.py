"""Human readable renderings of time conversion results."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

from common.formatting import format_integer

from .engine import parse_datetime

# Fixed English abbreviations; strftime("%b") follows the process locale.
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _display(value: datetime) -> str:
    month = MONTH_ABBREVIATIONS[value.month - 1]
    return (
        f"{month} {value.day}, {value.year}, "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def format_local_datetime_display(
    local_datetime: str,
    timezone_name: str,
    is_dst: bool,
    *,
    tz: Optional[tzinfo] = None,
) -> str:
    """Render e.g. ``"Oct 30, 2025, 21:53:31 PDT (DST)"`` in 24-hour time."""

    parsed = parse_datetime(local_datetime)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz)
    indicator = "DST" if is_dst else "STD"
    return f"{_display(parsed)} {timezone_name} ({indicator})"


def format_utc_datetime_display(utc_datetime: str) -> str:
    """Render e.g. ``"Jan 1, 2022, 00:00:00 UTC"``."""

    parsed = parse_datetime(utc_datetime)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return f"{_display(parsed.astimezone(timezone.utc))} UTC"


def format_unix_seconds(seconds: int) -> str:
    return format_integer(seconds)


def format_unix_milliseconds(milliseconds: int) -> str:
    return format_integer(milliseconds)


__all__ = [
    "format_local_datetime_display",
    "format_utc_datetime_display",
    "format_unix_seconds",
    "format_unix_milliseconds",
]
