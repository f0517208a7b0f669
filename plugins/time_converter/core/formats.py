"""Input formats accepted by the time converter and their dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Dict, List, Optional

from common.errors import InvalidDatetimeError, UnknownUnitError

from .engine import (
    TimeConversionResult,
    from_local_datetime,
    from_unix_milliseconds,
    from_unix_seconds,
    from_utc_datetime,
)
from .validators import (
    is_valid_datetime,
    is_valid_unix_milliseconds,
    is_valid_unix_seconds,
    parse_number,
)


@dataclass(frozen=True, slots=True)
class TimeFormat:
    id: str
    name: str
    description: str


TIME_FORMATS: tuple[TimeFormat, ...] = (
    TimeFormat(
        "unix-seconds",
        "Unix Epoch (Seconds)",
        "Seconds since January 1, 1970 00:00:00 UTC",
    ),
    TimeFormat(
        "unix-milliseconds",
        "Unix Epoch (Milliseconds)",
        "Milliseconds since January 1, 1970 00:00:00 UTC",
    ),
    TimeFormat("local-datetime", "Local Datetime", "Your local timezone date and time"),
    TimeFormat("utc-datetime", "UTC Datetime", "Coordinated Universal Time"),
)

_BY_ID: Dict[str, TimeFormat] = {item.id: item for item in TIME_FORMATS}

_VALIDATORS: Dict[str, Callable[[str], bool]] = {
    "unix-seconds": is_valid_unix_seconds,
    "unix-milliseconds": is_valid_unix_milliseconds,
    "local-datetime": is_valid_datetime,
    "utc-datetime": is_valid_datetime,
}

_ERRORS: Dict[str, str] = {
    "unix-seconds": "Enter Unix seconds between 0 and 4102444800",
    "unix-milliseconds": "Enter Unix milliseconds between 0 and 4102444800000",
    "local-datetime": "Enter a datetime such as 2025-10-19T14:30:00",
    "utc-datetime": "Enter a UTC datetime such as 2025-10-19T18:30:00.000Z",
}


def get_time_format(format_id: str) -> TimeFormat:
    try:
        return _BY_ID[format_id]
    except KeyError:
        raise UnknownUnitError(format_id, category="time") from None


def get_time_format_names() -> List[str]:
    return [item.name for item in TIME_FORMATS]


def get_time_format_id_from_name(name: str) -> Optional[str]:
    wanted = name.strip().lower()
    for item in TIME_FORMATS:
        if item.name.lower() == wanted:
            return item.id
    return None


def validate_time_value(value: str, from_format: str) -> bool:
    get_time_format(from_format)
    return _VALIDATORS[from_format](value)


def convert_time(
    value: str, from_format: str, *, tz: Optional[tzinfo] = None
) -> TimeConversionResult:
    """Validate ``value`` for ``from_format`` and convert it."""

    if not validate_time_value(value, from_format):
        raise InvalidDatetimeError(_ERRORS[from_format])
    if from_format == "unix-seconds":
        return from_unix_seconds(parse_number(value), tz=tz)
    if from_format == "unix-milliseconds":
        return from_unix_milliseconds(parse_number(value), tz=tz)
    if from_format == "local-datetime":
        return from_local_datetime(value, tz=tz)
    return from_utc_datetime(value, tz=tz)


__all__ = [
    "TimeFormat",
    "TIME_FORMATS",
    "get_time_format",
    "get_time_format_names",
    "get_time_format_id_from_name",
    "validate_time_value",
    "convert_time",
]
