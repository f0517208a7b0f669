"""Conversions between Unix timestamps and calendar datetimes.

Every entry point normalises its input to an absolute instant (an aware UTC
:class:`~datetime.datetime`) and then projects that instant onto the six
fields of :class:`TimeConversionResult`. ``tz`` selects the zone used for the
local projection; ``None`` means the zone of the running process.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Optional

from common.errors import InvalidDatetimeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)
UNKNOWN_TIMEZONE = "Unknown"


@dataclass(frozen=True, slots=True)
class TimeConversionResult:
    """Six projections of the same instant."""

    unix_seconds: int
    unix_milliseconds: int
    local_datetime: str
    utc_datetime: str
    timezone: str
    is_dst: bool

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def parse_datetime(text: str) -> datetime:
    """Parse an ISO 8601 string, accepting a trailing ``Z`` for UTC."""

    if not isinstance(text, str) or not text.strip():
        raise InvalidDatetimeError("A datetime value is required")
    cleaned = text.strip()
    if cleaned[-1] in "zZ":
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError as exc:
        raise InvalidDatetimeError(f"Invalid datetime '{text}'") from exc


def _calendar(value: datetime) -> str:
    # strftime does not zero-pad years below 1000 on every platform.
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def format_utc_iso(instant: datetime) -> str:
    """Render ``instant`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    utc = instant.astimezone(timezone.utc)
    return f"{_calendar(utc)}.{utc.microsecond // 1000:03d}Z"


def _reference_offsets(year: int, tz: Optional[tzinfo]) -> tuple[timedelta, timedelta]:
    offsets = []
    for month in (1, 7):
        wall = datetime(year, month, 1)
        aware = wall.astimezone() if tz is None else wall.replace(tzinfo=tz)
        offsets.append(aware.utcoffset() or timedelta(0))
    return offsets[0], offsets[1]


def detect_dst(local: datetime, tz: Optional[tzinfo] = None) -> bool:
    """Best-effort daylight saving detection.

    The smaller of the January 1 and July 1 offsets of ``local``'s year is
    taken as standard time; any instant whose offset is ahead of it is
    reported as DST. Zones that changed their standard offset mid-year can
    be misreported.
    """

    standard = min(_reference_offsets(local.year, tz))
    return (local.utcoffset() or timedelta(0)) > standard


def _instant_from_milliseconds(milliseconds: int) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=milliseconds)
    except OverflowError as exc:
        raise InvalidDatetimeError(
            f"Timestamp {milliseconds} ms is outside the supported range"
        ) from exc


def _milliseconds(value: float, scale: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDatetimeError(f"Timestamp must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidDatetimeError(f"Timestamp must be finite, got {value!r}")
    return math.trunc(value * scale)


def project_instant(instant: datetime, *, tz: Optional[tzinfo] = None) -> TimeConversionResult:
    """Project an aware ``instant`` onto all result fields."""

    milliseconds = (instant - EPOCH) // ONE_MILLISECOND
    try:
        local = instant.astimezone(tz)
        is_dst = detect_dst(local, tz)
    except (OverflowError, ValueError, OSError) as exc:
        raise InvalidDatetimeError(
            f"Instant {milliseconds} ms cannot be shown in the local time zone"
        ) from exc
    return TimeConversionResult(
        unix_seconds=milliseconds // 1000,
        unix_milliseconds=milliseconds,
        local_datetime=_calendar(local),
        utc_datetime=format_utc_iso(instant),
        timezone=local.tzname() or UNKNOWN_TIMEZONE,
        is_dst=is_dst,
    )


def from_unix_seconds(seconds: float, *, tz: Optional[tzinfo] = None) -> TimeConversionResult:
    return project_instant(_instant_from_milliseconds(_milliseconds(seconds, 1000)), tz=tz)


def from_unix_milliseconds(
    milliseconds: float, *, tz: Optional[tzinfo] = None
) -> TimeConversionResult:
    return project_instant(_instant_from_milliseconds(_milliseconds(milliseconds, 1)), tz=tz)


def _aware(parsed: datetime, assumed: Optional[tzinfo]) -> datetime:
    if parsed.tzinfo is not None:
        return parsed
    try:
        # A naive astimezone() call interprets the wall clock in the process zone.
        return parsed.astimezone() if assumed is None else parsed.replace(tzinfo=assumed)
    except (OverflowError, ValueError, OSError) as exc:
        raise InvalidDatetimeError(f"Datetime {parsed.isoformat()} is out of range") from exc


def from_local_datetime(text: str, *, tz: Optional[tzinfo] = None) -> TimeConversionResult:
    """Convert a wall-clock datetime in the local zone.

    ``text`` is usually offset-free (``2025-10-19T14:30:00``); an explicit
    offset in the string takes precedence over the local zone.
    """

    instant = _aware(parse_datetime(text), tz)
    return project_instant(instant, tz=tz)


def from_utc_datetime(text: str, *, tz: Optional[tzinfo] = None) -> TimeConversionResult:
    """Convert an ISO datetime carrying ``Z`` or an offset; naive means UTC."""

    instant = _aware(parse_datetime(text), timezone.utc)
    return project_instant(instant, tz=tz)


def get_current_time(*, tz: Optional[tzinfo] = None) -> TimeConversionResult:
    """Return the current instant in every format."""

    return project_instant(datetime.now(timezone.utc), tz=tz)


__all__ = [
    "EPOCH",
    "TimeConversionResult",
    "parse_datetime",
    "format_utc_iso",
    "detect_dst",
    "project_instant",
    "from_unix_seconds",
    "from_unix_milliseconds",
    "from_local_datetime",
    "from_utc_datetime",
    "get_current_time",
]
