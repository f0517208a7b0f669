"""Key-value store for the default unit of each category."""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, Mapping, Optional

from common.errors import UnknownUnitError
from common.logging import get_logger

logger = get_logger(__name__)

DEFAULT_UNIT_PREFERENCES: Dict[str, str] = {
    "length": "Kilometers",
    "volume": "Liters",
    "weight": "Ounces",
    "temperature": "Celsius",
    "time": "Unix Epoch (Seconds)",
    "date": "Pick end date",
    "numbers": "Compare two numbers",
}


class PreferenceStore:
    """Thread-safe preference mapping seeded with defaults.

    Only keys present in ``defaults`` may be written. Subclasses persist the
    values by overriding :meth:`_load`, :meth:`_save` and :meth:`_clear`.
    """

    def __init__(self, defaults: Mapping[str, str] | None = None) -> None:
        self._defaults = dict(defaults or DEFAULT_UNIT_PREFERENCES)
        self._lock = threading.Lock()
        self._values = dict(self._defaults)
        for key, value in self._load().items():
            if key in self._defaults and isinstance(value, str):
                self._values[key] = value

    @property
    def defaults(self) -> Dict[str, str]:
        return dict(self._defaults)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self.update({key: value})

    def update(self, updates: Mapping[str, str]) -> Dict[str, str]:
        for key in updates:
            if key not in self._defaults:
                raise UnknownUnitError(key, category="preference")
        with self._lock:
            candidate = dict(self._values)
            candidate.update({key: str(value) for key, value in updates.items()})
            # Only a saved candidate replaces the current values.
            self._save(candidate)
            self._values = candidate
            return dict(candidate)

    def reset(self) -> Dict[str, str]:
        with self._lock:
            self._values = dict(self._defaults)
            self._clear()
            return dict(self._values)

    def snapshot(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._values)

    def _load(self) -> Mapping[str, object]:
        return {}

    def _save(self, values: Mapping[str, str]) -> None:
        return None

    def _clear(self) -> None:
        return None


class InMemoryPreferenceStore(PreferenceStore):
    """Preferences that live for the lifetime of the process."""


class JsonFilePreferenceStore(PreferenceStore):
    """Preferences persisted to a JSON document on disk."""

    def __init__(self, path: Path | str, defaults: Mapping[str, str] | None = None) -> None:
        self.path = Path(path).expanduser()
        super().__init__(defaults)

    def _load(self) -> Mapping[str, object]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring preferences file %s: expected an object", self.path)
            return {}
        return data

    def _save(self, values: Mapping[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(dict(values), handle, indent=2, sort_keys=True)

    def _clear(self) -> None:
        self.path.unlink(missing_ok=True)


def build_store(path: Path | str | None) -> PreferenceStore:
    if path:
        return JsonFilePreferenceStore(path)
    return InMemoryPreferenceStore()


__all__ = [
    "DEFAULT_UNIT_PREFERENCES",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "build_store",
]
