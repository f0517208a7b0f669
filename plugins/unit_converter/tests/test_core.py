import math

import pytest

from common.errors import UnknownUnitError
from plugins.unit_converter.core import (
    CATEGORIES,
    convert,
    convert_length,
    convert_temperature,
    convert_volume,
    convert_weight,
    get_category,
    get_length_unit_names,
    get_temperature_unit_names,
    get_unit_id_from_name,
)
from plugins.unit_converter.core.engine import LinearCategory, Unit
from plugins.unit_converter.core.tables import LENGTH, VOLUME, WEIGHT


def _by_id(results):
    return {item.unit_id: item.value for item in results}


@pytest.mark.parametrize("category", [LENGTH, VOLUME, WEIGHT], ids=lambda c: c.id)
@pytest.mark.parametrize("value", [0.0, 1.0, -42.5, 1234.5678, 1e-6, 9.87e9])
def test_units_round_trip_through_base(category, value):
    for unit in category.table:
        assert unit.from_base(unit.to_base(value)) == pytest.approx(value, rel=1e-9, abs=1e-12)


@pytest.mark.parametrize("category_id", list(CATEGORIES))
def test_convert_returns_every_other_unit(category_id):
    engine = CATEGORIES[category_id]
    for unit_id in engine.table.ids():
        results = engine.convert(3, unit_id)
        assert len(results) == len(engine.table) - 1
        assert unit_id not in {item.unit_id for item in results}


def test_length_from_one_meter():
    values = _by_id(convert_length(1, "meter"))
    assert values["centimeter"] == "100"
    assert values["millimeter"] == "1,000"
    assert values["foot"] == "3.28"
    assert values["inch"] == "39.37"
    # Sub-threshold values are kept, rounded to zero.
    assert values["kilometer"] == "0.00"


def test_length_result_carries_name_and_symbol():
    result = next(item for item in convert_length(1, "mile") if item.unit_id == "kilometer")
    assert result.unit_name == "Kilometers"
    assert result.symbol == "km"
    assert result.value == "1.61"


def test_volume_absorbs_factor_noise():
    values = _by_id(convert_volume(1, "gallon"))
    assert values["liter"] == "3.79"
    assert values["quart"] == "4"
    assert values["pint"] == "8"
    assert values["milliliter"] == "3,785.41"


def test_weight_from_one_kilogram():
    values = _by_id(convert_weight(1, "kilogram"))
    assert values["gram"] == "1,000"
    assert values["pound"] == "2.20"
    assert values["metricTon"] == "0.00"


def test_temperature_from_celsius():
    values = _by_id(convert_temperature(0, "celsius"))
    assert values == {"fahrenheit": "32", "kelvin": "273.15"}
    assert _by_id(convert_temperature(100, "celsius"))["fahrenheit"] == "212"


def test_temperature_from_fahrenheit_and_kelvin():
    assert _by_id(convert_temperature(32, "fahrenheit")) == {"celsius": "0", "kelvin": "273.15"}
    assert _by_id(convert_temperature(0, "kelvin")) == {
        "celsius": "-273.15",
        "fahrenheit": "-459.67",
    }
    assert _by_id(convert_temperature(-40, "celsius"))["fahrenheit"] == "-40"


def test_temperature_results_follow_declared_order():
    assert [item.unit_id for item in convert_temperature(1, "fahrenheit")] == ["celsius", "kelvin"]


@pytest.mark.parametrize(
    "func", [convert_length, convert_volume, convert_weight, convert_temperature]
)
def test_unknown_unit_names_the_bad_id(func):
    with pytest.raises(UnknownUnitError) as excinfo:
        func(1, "not-a-real-unit")
    assert "not-a-real-unit" in str(excinfo.value)
    assert excinfo.value.unit == "not-a-real-unit"


def test_unit_names_and_reverse_lookup():
    assert get_length_unit_names()[0] == "Kilometers"
    assert get_temperature_unit_names() == ["Celsius", "Fahrenheit", "Kelvin"]
    assert get_unit_id_from_name("volume", "fluid ounces") == "fluidOunce"
    assert get_unit_id_from_name("weight", "US TONS") == "usTon"
    assert get_unit_id_from_name("length", "Furlongs") is None


def test_convert_accepts_display_names():
    values = _by_id(convert("length", 1, "Kilometers"))
    assert values["meter"] == "1,000"


def test_unknown_category_raises():
    with pytest.raises(UnknownUnitError):
        get_category("speed")


def test_duplicate_unit_ids_are_rejected():
    with pytest.raises(ValueError):
        LinearCategory("test", "Test", "a", [Unit("a", "A", "a", 1), Unit("a", "B", "b", 2)])


def test_nan_input_is_rejected_by_formatter():
    with pytest.raises(ValueError):
        convert_length(math.nan, "meter")
