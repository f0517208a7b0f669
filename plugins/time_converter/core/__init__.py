"""Exports for the time converter core."""

from .display import (
    format_local_datetime_display,
    format_unix_milliseconds,
    format_unix_seconds,
    format_utc_datetime_display,
)
from .engine import (
    TimeConversionResult,
    detect_dst,
    from_local_datetime,
    from_unix_milliseconds,
    from_unix_seconds,
    from_utc_datetime,
    get_current_time,
    parse_datetime,
)
from .formats import (
    TIME_FORMATS,
    TimeFormat,
    convert_time,
    get_time_format,
    get_time_format_id_from_name,
    get_time_format_names,
    validate_time_value,
)
from .validators import (
    MAX_UNIX_MILLISECONDS,
    MAX_UNIX_SECONDS,
    is_valid_datetime,
    is_valid_unix_milliseconds,
    is_valid_unix_seconds,
)

__all__ = [
    "TimeConversionResult",
    "detect_dst",
    "from_local_datetime",
    "from_unix_milliseconds",
    "from_unix_seconds",
    "from_utc_datetime",
    "get_current_time",
    "parse_datetime",
    "format_local_datetime_display",
    "format_utc_datetime_display",
    "format_unix_seconds",
    "format_unix_milliseconds",
    "TIME_FORMATS",
    "TimeFormat",
    "convert_time",
    "get_time_format",
    "get_time_format_id_from_name",
    "get_time_format_names",
    "validate_time_value",
    "MAX_UNIX_SECONDS",
    "MAX_UNIX_MILLISECONDS",
    "is_valid_datetime",
    "is_valid_unix_milliseconds",
    "is_valid_unix_seconds",
]
