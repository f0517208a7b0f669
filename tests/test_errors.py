from common.errors import (
    AppError,
    InvalidDatetimeError,
    InvalidInputError,
    UnknownUnitError,
    ensure_app_error,
    to_app_error,
)


def test_unknown_unit_error_message():
    error = UnknownUnitError("furlong", category="length")
    assert str(error) == "Unknown length unit 'furlong'"
    assert isinstance(error, LookupError)


def test_domain_errors_map_to_codes():
    unknown = to_app_error(UnknownUnitError("furlong", category="length"))
    assert unknown.code == "unit.unknown"
    assert unknown.status_code == 400
    assert unknown.to_dict()["details"] == {"unit": "furlong", "category": "length"}

    assert to_app_error(InvalidDatetimeError("bad")).code == "time.invalid_datetime"
    assert to_app_error(InvalidInputError("nan")).code == "number.invalid_input"
    assert to_app_error(InvalidInputError("nan"), code="custom").code == "custom"


def test_ensure_app_error():
    existing = AppError(message="boom", code="x")
    assert ensure_app_error(existing, fallback_code="internal_error") is existing

    wrapped = ensure_app_error(RuntimeError("oops"), fallback_code="internal_error")
    assert wrapped.code == "internal_error"
    assert wrapped.status_code == 500

    translated = ensure_app_error(InvalidDatetimeError("bad"), fallback_code="internal_error")
    assert translated.code == "time.invalid_datetime"
