"""API routes for the date calculator plugin."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, Response, current_app, request
from pydantic import Field

from common.errors import InternalAppError, InvalidDatetimeError, InvalidInputError, ValidationAppError
from common.responses import fail, ok
from common.timezones import resolve_timezone, today
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import compute_difference, compute_offset

# Keeps the end date inside the year range Python's calendar supports.
MAX_DAY_OFFSET = 1_000_000


class DifferencePayload(SchemaModel):
    from_date: date | None = None
    to_date: date


class OffsetPayload(SchemaModel):
    from_date: date | None = None
    days: int = Field(ge=-MAX_DAY_OFFSET, le=MAX_DAY_OFFSET)


api_bp = Blueprint("date_calculator_api", __name__, url_prefix="/api/date_calculator")


def _today() -> date:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("time_converter", {})
    return today(resolve_timezone(current_app.config, settings))


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="date.invalid_request",
            details={"errors": getattr(exc, "details", None)},
        )
    )


@api_bp.get("/today")
def today_endpoint() -> Response:
    try:
        current = _today()
    except ValueError as exc:
        return fail(InternalAppError(message=str(exc), code="time.invalid_timezone"))
    return ok({"today": current.isoformat()})


@api_bp.post("/difference")
def difference_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(DifferencePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        start = payload.from_date or _today()
        result = compute_difference(start, payload.to_date)
    except InvalidDatetimeError as exc:
        return fail(exc)
    except ValueError as exc:
        return fail(InternalAppError(message=str(exc), code="time.invalid_timezone"))
    return ok(result.to_dict())


@api_bp.post("/offset")
def offset_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(OffsetPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    try:
        start = payload.from_date or _today()
        result = compute_offset(start, payload.days)
    except (InvalidDatetimeError, InvalidInputError) as exc:
        return fail(exc)
    except ValueError as exc:
        return fail(InternalAppError(message=str(exc), code="time.invalid_timezone"))
    return ok(result.to_dict())


blueprints = [api_bp]


__all__ = ["blueprints", "today_endpoint", "difference_endpoint", "offset_endpoint"]
