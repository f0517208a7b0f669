"""Allowed preference values per category."""

from __future__ import annotations

from typing import Dict, List, Mapping

from common.validation import ValidationError
from plugins.date_calculator.core import MODES as DATE_MODES
from plugins.number_tools.core import MODES as NUMBER_MODES
from plugins.time_converter.core import get_time_format_names
from plugins.unit_converter.core import CATEGORIES


def preference_options() -> Dict[str, List[str]]:
    options = {category: engine.unit_names() for category, engine in CATEGORIES.items()}
    options["time"] = get_time_format_names()
    options["date"] = list(DATE_MODES)
    options["numbers"] = list(NUMBER_MODES)
    return options


def normalize_preferences(updates: Mapping[str, str]) -> Dict[str, str]:
    """Match each value case-insensitively against its category's options.

    Returns the canonical spelling; unknown categories are passed through so
    the store can reject them.
    """

    options = preference_options()
    normalized: Dict[str, str] = {}
    errors: Dict[str, str] = {}
    for key, value in updates.items():
        allowed = options.get(key)
        if allowed is None:
            normalized[key] = value
            continue
        match = next((item for item in allowed if item.lower() == value.strip().lower()), None)
        if match is None:
            errors[key] = f"'{value}' is not one of: {', '.join(allowed)}"
        else:
            normalized[key] = match
    if errors:
        raise ValidationError("Invalid preference value", details=errors)
    return normalized


__all__ = ["preference_options", "normalize_preferences"]
