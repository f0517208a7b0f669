"""Temperature conversions.

Temperature scales differ by an offset as well as a scale factor, so the
conversions use direct formulas per pair of units instead of a base unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from common.formatting import format_number

from .engine import ConversionResult, UnitTable

ABSOLUTE_ZERO_OFFSET = 273.15


@dataclass(frozen=True, slots=True)
class TemperatureUnit:
    id: str
    name: str
    symbol: str


TEMPERATURE_UNITS: tuple[TemperatureUnit, ...] = (
    TemperatureUnit("celsius", "Celsius", "°C"),
    TemperatureUnit("fahrenheit", "Fahrenheit", "°F"),
    TemperatureUnit("kelvin", "Kelvin", "K"),
)


def celsius_to_fahrenheit(celsius: float) -> float:
    return (celsius * 9) / 5 + 32


def celsius_to_kelvin(celsius: float) -> float:
    return celsius + ABSOLUTE_ZERO_OFFSET


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return ((fahrenheit - 32) * 5) / 9


def fahrenheit_to_kelvin(fahrenheit: float) -> float:
    return ((fahrenheit - 32) * 5) / 9 + ABSOLUTE_ZERO_OFFSET


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - ABSOLUTE_ZERO_OFFSET


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return ((kelvin - ABSOLUTE_ZERO_OFFSET) * 9) / 5 + 32


FORMULAS: Dict[tuple[str, str], Callable[[float], float]] = {
    ("celsius", "fahrenheit"): celsius_to_fahrenheit,
    ("celsius", "kelvin"): celsius_to_kelvin,
    ("fahrenheit", "celsius"): fahrenheit_to_celsius,
    ("fahrenheit", "kelvin"): fahrenheit_to_kelvin,
    ("kelvin", "celsius"): kelvin_to_celsius,
    ("kelvin", "fahrenheit"): kelvin_to_fahrenheit,
}


class TemperatureCategory:
    """Conversion category for Celsius, Fahrenheit and Kelvin."""

    id = "temperature"
    title = "Temperature"
    base_unit = None

    def __init__(self) -> None:
        self.table = UnitTable(self.id, TEMPERATURE_UNITS)

    def convert(self, value: float, from_unit_id: str) -> List[ConversionResult]:
        source = self.table.get(from_unit_id)
        results: List[ConversionResult] = []
        for unit in self.table:
            if unit.id == source.id:
                continue
            formula = FORMULAS[(source.id, unit.id)]
            results.append(
                ConversionResult(
                    unit_id=unit.id,
                    unit_name=unit.name,
                    symbol=unit.symbol,
                    value=format_number(formula(value)),
                )
            )
        return results

    def unit_names(self) -> List[str]:
        return self.table.names()

    def unit_id_from_name(self, name: str) -> Optional[str]:
        return self.table.id_from_name(name)

    def describe(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "base_unit": None,
            "units": [
                {"id": unit.id, "name": unit.name, "symbol": unit.symbol}
                for unit in self.table
            ],
        }


TEMPERATURE = TemperatureCategory()


__all__ = [
    "TemperatureUnit",
    "TEMPERATURE_UNITS",
    "FORMULAS",
    "TemperatureCategory",
    "TEMPERATURE",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "fahrenheit_to_celsius",
    "fahrenheit_to_kelvin",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
]
