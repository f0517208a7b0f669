"""Query-string value parsing helpers shared across plugins."""

from __future__ import annotations

import math
from typing import Any, Mapping

from .validation import ValidationError


FormDataLike = Mapping[str, Any] | Any


def _lookup(data: FormDataLike, key: str) -> Any:
    if data is None:
        return None
    getter = getattr(data, "get", None)
    if callable(getter):
        return getter(key)
    return data[key] if isinstance(data, Mapping) and key in data else None


def get_float(
    data: FormDataLike,
    key: str,
    default: float | None = None,
    *,
    field_name: str | None = None,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Extract a finite float from *data* with validation.

    Missing or blank values fall back to ``default``; when no default is
    given the value is required. ``minimum`` and ``maximum`` are inclusive.
    """

    field_label = field_name or key
    raw = _lookup(data, key)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        if default is None:
            raise ValidationError(f"{field_label} is required")
        value = default
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid value for {field_label}") from exc

    if not math.isfinite(value):
        raise ValidationError(f"{field_label} must be a finite number")
    if minimum is not None and value < minimum:
        raise ValidationError(f"{field_label} must be ≥ {minimum}")
    if maximum is not None and value > maximum:
        raise ValidationError(f"{field_label} must be ≤ {maximum}")

    return value


def get_str(
    data: FormDataLike,
    key: str,
    default: str | None = None,
    *,
    field_name: str | None = None,
) -> str:
    """Extract a stripped, non-empty string from *data*."""

    raw = _lookup(data, key)
    if raw is None or not str(raw).strip():
        if default is None:
            raise ValidationError(f"{field_name or key} is required")
        return default
    return str(raw).strip()


__all__ = ["get_float", "get_str"]
