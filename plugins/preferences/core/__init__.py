"""Exports for the preferences core."""

from .options import normalize_preferences, preference_options
from .store import (
    DEFAULT_UNIT_PREFERENCES,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
    build_store,
)

__all__ = [
    "DEFAULT_UNIT_PREFERENCES",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "PreferenceStore",
    "build_store",
    "normalize_preferences",
    "preference_options",
]
