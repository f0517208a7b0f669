"""Facade for the unit converter core."""

from __future__ import annotations

from typing import Dict, List, Optional

from common.errors import UnknownUnitError

from .engine import CategoryEngine, ConversionResult, LinearCategory, Unit, UnitTable
from .tables import LENGTH, VOLUME, WEIGHT
from .temperature import TEMPERATURE, TemperatureCategory

CATEGORIES: Dict[str, CategoryEngine] = {
    category.id: category for category in (LENGTH, VOLUME, WEIGHT, TEMPERATURE)
}


def list_categories() -> List[str]:
    """Return the category ids in display order."""

    return list(CATEGORIES.keys())


def get_category(category: str) -> CategoryEngine:
    try:
        return CATEGORIES[category]
    except KeyError:
        raise UnknownUnitError(category, category="category") from None


def convert(category: str, value: float, from_unit: str) -> List[ConversionResult]:
    """Convert ``value`` to every other unit of ``category``.

    ``from_unit`` may be a unit id or its display name.
    """

    engine = get_category(category)
    return engine.convert(value, engine.table.resolve(from_unit))


def get_unit_id_from_name(category: str, name: str) -> Optional[str]:
    return get_category(category).unit_id_from_name(name)


def convert_length(value: float, from_unit_id: str) -> List[ConversionResult]:
    return LENGTH.convert(value, from_unit_id)


def convert_volume(value: float, from_unit_id: str) -> List[ConversionResult]:
    return VOLUME.convert(value, from_unit_id)


def convert_weight(value: float, from_unit_id: str) -> List[ConversionResult]:
    return WEIGHT.convert(value, from_unit_id)


def convert_temperature(value: float, from_unit_id: str) -> List[ConversionResult]:
    return TEMPERATURE.convert(value, from_unit_id)


def get_length_unit_names() -> List[str]:
    return LENGTH.unit_names()


def get_volume_unit_names() -> List[str]:
    return VOLUME.unit_names()


def get_weight_unit_names() -> List[str]:
    return WEIGHT.unit_names()


def get_temperature_unit_names() -> List[str]:
    return TEMPERATURE.unit_names()


__all__ = [
    "CATEGORIES",
    "CategoryEngine",
    "ConversionResult",
    "LinearCategory",
    "TemperatureCategory",
    "Unit",
    "UnitTable",
    "UnknownUnitError",
    "list_categories",
    "get_category",
    "convert",
    "get_unit_id_from_name",
    "convert_length",
    "convert_volume",
    "convert_weight",
    "convert_temperature",
    "get_length_unit_names",
    "get_volume_unit_names",
    "get_weight_unit_names",
    "get_temperature_unit_names",
]
