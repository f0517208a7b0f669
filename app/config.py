"""Configuration classes for the Flask application."""

from __future__ import annotations

import os
import secrets


def _load_secret() -> str:
    """Return the Flask secret key for the current process."""

    secret = os.environ.get("CONVERTER_SECRET")
    if secret:
        return secret
    # Generate an unpredictable per-process key for local development.
    return secrets.token_urlsafe(64)


class BaseConfig:
    SECRET_KEY = _load_secret()
    MAX_CONTENT_LENGTH = 64 * 1024  # JSON payloads only
    JSON_SORT_KEYS = False
    LOG_LEVEL = os.environ.get("CONVERTER_LOG_LEVEL", "INFO")
    # IANA zone name for local projections; None uses the process zone.
    TIMEZONE: str | None = None
    # JSON file for stored preferences; None keeps them in memory.
    PREFERENCES_PATH: str | None = os.environ.get("CONVERTER_PREFERENCES_PATH")
    RESPONSE_HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
        "Referrer-Policy": "no-referrer",
        "Cache-Control": "no-store",
    }


class TestingConfig(BaseConfig):
    TESTING = True
    LOG_LEVEL = "WARNING"
    PREFERENCES_PATH = None


__all__ = ["BaseConfig", "TestingConfig"]
