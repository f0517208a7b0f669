"""Input validators for the time converter form fields."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from common.errors import InvalidDatetimeError

from .engine import parse_datetime

# 2100-01-01T00:00:00Z
MAX_UNIX_SECONDS = 4_102_444_800
MAX_UNIX_MILLISECONDS = MAX_UNIX_SECONDS * 1000

# Plain ASCII decimals; float() alone also takes "1_000" and non-ASCII digits.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` if it is not one."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL.fullmatch(text):
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def is_valid_unix_seconds(value: Any) -> bool:
    number = parse_number(value)
    return number is not None and 0 <= number <= MAX_UNIX_SECONDS


def is_valid_unix_milliseconds(value: Any) -> bool:
    number = parse_number(value)
    return number is not None and 0 <= number <= MAX_UNIX_MILLISECONDS


def is_valid_datetime(value: Any) -> bool:
    try:
        parse_datetime(value)
    except InvalidDatetimeError:
        return False
    return True


__all__ = [
    "MAX_UNIX_SECONDS",
    "MAX_UNIX_MILLISECONDS",
    "parse_number",
    "is_valid_unix_seconds",
    "is_valid_unix_milliseconds",
    "is_valid_datetime",
]
