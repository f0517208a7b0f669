from common.forms import get_float, get_str
from common.validation import ValidationError


def test_get_float_with_defaults_and_bounds():
    assert get_float({}, "value", 1.5) == 1.5
    assert get_float({"value": "2.25"}, "value", 1.5) == 2.25
    assert get_float({"value": " "}, "value", 1.5) == 1.5

    try:
        get_float({"value": "bad"}, "value", 1.5)
    except ValidationError as exc:
        assert "Invalid value" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("Expected ValidationError for non-numeric input")

    try:
        get_float({"value": "0.1"}, "value", 1.5, minimum=0.5)
    except ValidationError as exc:
        assert "must be ≥" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("Expected ValidationError for values below minimum")


def test_get_float_requires_finite_values():
    for raw in ("nan", "inf", "-Infinity"):
        try:
            get_float({"value": raw}, "value")
        except ValidationError as exc:
            assert "finite" in str(exc)
        else:  # pragma: no cover
            raise AssertionError(f"Expected ValidationError for {raw}")

    try:
        get_float({}, "value", field_name="Value")
    except ValidationError as exc:
        assert str(exc) == "Value is required"
    else:  # pragma: no cover
        raise AssertionError("Expected ValidationError for missing value")


def test_get_str_strips_and_defaults():
    assert get_str({"unit": " meter "}, "unit") == "meter"
    assert get_str({}, "unit", "meter") == "meter"

    try:
        get_str({"unit": "  "}, "unit")
    except ValidationError as exc:
        assert "unit is required" in str(exc)
    else:  # pragma: no cover
        raise AssertionError("Expected ValidationError for blank string")
