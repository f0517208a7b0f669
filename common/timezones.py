"""Helpers for resolving the display time zone and the current date."""

from __future__ import annotations

import os
from datetime import date, datetime, tzinfo
from typing import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE_ENV = "CONVERTER_TIMEZONE"
LOCAL_ZONE_NAMES = {"", "local", "system"}


def resolve_timezone(
    app_config: Mapping[str, object],
    plugin_settings: Mapping[str, object] | None = None,
) -> tzinfo | None:
    """Return the configured zone, or ``None`` for the process local zone.

    Lookup order: the environment variable named by ``timezone_env`` (default
    ``CONVERTER_TIMEZONE``), the plugin's ``timezone`` setting, then the
    application's ``TIMEZONE`` setting.
    """

    plugin_settings = plugin_settings or {}
    env_var = plugin_settings.get("timezone_env") or DEFAULT_TIMEZONE_ENV
    name = (
        os.getenv(str(env_var))
        or plugin_settings.get("timezone")
        or app_config.get("TIMEZONE")
    )
    if name is None or str(name).strip().lower() in LOCAL_ZONE_NAMES:
        return None
    try:
        return ZoneInfo(str(name).strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone '{name}'") from exc


def today(tz: tzinfo | None = None) -> date:
    """Return the current calendar date in ``tz`` (local zone when ``None``)."""

    if tz is None:
        return date.today()
    return datetime.now(tz).date()


__all__ = ["resolve_timezone", "today", "DEFAULT_TIMEZONE_ENV"]
