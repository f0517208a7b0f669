"""Base-unit conversion engine shared by the linear categories."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Iterable, List, Optional, Protocol

from common.errors import UnknownUnitError
from common.formatting import format_number


@dataclass(frozen=True, slots=True)
class Unit:
    """A unit expressed as a multiple of its category's base unit."""

    id: str
    name: str
    symbol: str
    factor: float

    def to_base(self, value: float) -> float:
        return value * self.factor

    def from_base(self, value: float) -> float:
        return value / self.factor


@dataclass(frozen=True, slots=True)
class ConversionResult:
    unit_id: str
    unit_name: str
    symbol: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class CategoryEngine(Protocol):
    """Interface every conversion category exposes to the API layer."""

    id: str
    title: str
    table: "UnitTable"

    def convert(self, value: float, from_unit_id: str) -> List[ConversionResult]:
        ...

    def unit_names(self) -> List[str]:
        ...

    def unit_id_from_name(self, name: str) -> Optional[str]:
        ...

    def describe(self) -> Dict[str, object]:
        ...


class UnitTable:
    """Ordered, immutable mapping of unit id to unit metadata."""

    def __init__(self, category: str, units: Iterable) -> None:
        self.category = category
        self._units = tuple(units)
        self._by_id = {}
        for unit in self._units:
            if unit.id in self._by_id:
                raise ValueError(f"Duplicate {category} unit id '{unit.id}'")
            self._by_id[unit.id] = unit

    def __iter__(self):
        return iter(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def __contains__(self, unit_id: object) -> bool:
        return unit_id in self._by_id

    def get(self, unit_id: str):
        try:
            return self._by_id[unit_id]
        except (KeyError, TypeError):
            raise UnknownUnitError(str(unit_id), category=self.category) from None

    def ids(self) -> List[str]:
        return [unit.id for unit in self._units]

    def names(self) -> List[str]:
        return [unit.name for unit in self._units]

    def id_from_name(self, name: str) -> Optional[str]:
        if not isinstance(name, str):
            return None
        wanted = name.strip().lower()
        for unit in self._units:
            if unit.name.lower() == wanted:
                return unit.id
        return None

    def resolve(self, unit: str) -> str:
        """Return the id for ``unit`` given either an id or a display name."""

        if unit in self._by_id:
            return unit
        unit_id = self.id_from_name(unit)
        if unit_id is None:
            raise UnknownUnitError(str(unit), category=self.category)
        return unit_id


class LinearCategory:
    """A category whose units convert through a single base unit."""

    def __init__(self, id: str, title: str, base_unit: str, units: Iterable[Unit]) -> None:
        self.id = id
        self.title = title
        self.table = UnitTable(id, units)
        if base_unit not in self.table:
            raise ValueError(f"Base unit '{base_unit}' missing from {id} table")
        self.base_unit = base_unit

    def convert(self, value: float, from_unit_id: str) -> List[ConversionResult]:
        source = self.table.get(from_unit_id)
        base_value = source.to_base(value)
        return [
            ConversionResult(
                unit_id=unit.id,
                unit_name=unit.name,
                symbol=unit.symbol,
                value=format_number(unit.from_base(base_value)),
            )
            for unit in self.table
            if unit.id != source.id
        ]

    def unit_names(self) -> List[str]:
        return self.table.names()

    def unit_id_from_name(self, name: str) -> Optional[str]:
        return self.table.id_from_name(name)

    def describe(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "base_unit": self.base_unit,
            "units": [
                {"id": unit.id, "name": unit.name, "symbol": unit.symbol}
                for unit in self.table
            ],
        }


__all__ = [
    "Unit",
    "ConversionResult",
    "CategoryEngine",
    "UnitTable",
    "LinearCategory",
]
