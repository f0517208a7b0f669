"""Error types shared by the conversion engines and the JSON API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping


class ConversionError(Exception):
    """Base exception for conversion failures."""


class UnknownUnitError(ConversionError, LookupError):
    """Raised when a unit id, unit name or category is not registered."""

    def __init__(self, unit: str, *, category: str | None = None):
        self.unit = unit
        self.category = category
        scope = f"{category} unit" if category else "unit"
        super().__init__(f"Unknown {scope} '{unit}'")


class InvalidDatetimeError(ConversionError, ValueError):
    """Raised when a date/time value does not resolve to a valid instant."""


class InvalidInputError(ConversionError, ValueError):
    """Raised when a numeric value is not finite."""


@dataclass(slots=True)
class AppError(Exception):
    """Base application error with a JSON friendly payload."""

    message: str
    code: str = "error"
    status_code: int = 400
    details: Mapping[str, Any] | None = None

    def to_dict(self) -> Mapping[str, Any]:
        payload: MutableMapping[str, Any] = {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details or {}),
        }
        return payload


@dataclass(slots=True)
class ValidationAppError(AppError):
    """Error raised for invalid user input."""

    code: str = "validation_error"
    status_code: int = 400


@dataclass(slots=True)
class NotFoundAppError(AppError):
    """Error raised when a category or preference key is missing."""

    code: str = "not_found"
    status_code: int = 404


@dataclass(slots=True)
class InternalAppError(AppError):
    """Generic internal error wrapper to avoid leaking implementation details."""

    code: str = "internal_error"
    status_code: int = 500


_DOMAIN_CODES: tuple[tuple[type[ConversionError], str], ...] = (
    (UnknownUnitError, "unit.unknown"),
    (InvalidDatetimeError, "time.invalid_datetime"),
    (InvalidInputError, "number.invalid_input"),
)


def to_app_error(error: ConversionError, *, code: str | None = None) -> AppError:
    """Translate a domain error into a 400 :class:`ValidationAppError`."""

    if code is None:
        code = "conversion_error"
        for error_type, error_code in _DOMAIN_CODES:
            if isinstance(error, error_type):
                code = error_code
                break
    details: dict[str, Any] = {}
    if isinstance(error, UnknownUnitError):
        details["unit"] = error.unit
        if error.category:
            details["category"] = error.category
    return ValidationAppError(message=str(error), code=code, details=details or None)


def ensure_app_error(error: AppError | Exception, *, fallback_code: str) -> AppError:
    """Coerce arbitrary exceptions into :class:`AppError` instances."""

    if isinstance(error, AppError):
        return error
    if isinstance(error, ConversionError):
        return to_app_error(error)
    return InternalAppError(code=fallback_code, message=str(error))


__all__ = [
    "ConversionError",
    "UnknownUnitError",
    "InvalidDatetimeError",
    "InvalidInputError",
    "AppError",
    "ValidationAppError",
    "NotFoundAppError",
    "InternalAppError",
    "to_app_error",
    "ensure_app_error",
]
