"""API routes for the time converter plugin."""

from __future__ import annotations

from datetime import tzinfo
from typing import Literal, Optional

from flask import Blueprint, Response, current_app, request

from common.errors import InternalAppError, InvalidDatetimeError, UnknownUnitError, ValidationAppError
from common.logging import get_logger
from common.responses import fail, ok
from common.timezones import resolve_timezone
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import (
    TIME_FORMATS,
    TimeConversionResult,
    convert_time,
    format_local_datetime_display,
    format_unix_milliseconds,
    format_unix_seconds,
    format_utc_datetime_display,
    get_current_time,
    validate_time_value,
)

logger = get_logger(__name__)

TimeFormatId = Literal["unix-seconds", "unix-milliseconds", "local-datetime", "utc-datetime"]


class TimePayload(SchemaModel):
    from_format: TimeFormatId = "unix-seconds"
    value: str | int | float


api_bp = Blueprint("time_converter_api", __name__, url_prefix="/api/time_converter")


def _zone() -> Optional[tzinfo]:
    settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("time_converter", {})
    return resolve_timezone(current_app.config, settings)


def _serialize(result: TimeConversionResult, zone: Optional[tzinfo]) -> dict:
    data = result.to_dict()
    data.update(
        {
            "unix_seconds_display": format_unix_seconds(result.unix_seconds),
            "unix_milliseconds_display": format_unix_milliseconds(result.unix_milliseconds),
            "local_display": format_local_datetime_display(
                result.local_datetime, result.timezone, result.is_dst, tz=zone
            ),
            "utc_display": format_utc_datetime_display(result.utc_datetime),
        }
    )
    return data


def _parse_payload() -> TimePayload | Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        return parse_model(TimePayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="time.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )


@api_bp.get("/formats")
def formats() -> Response:
    items = [
        {"id": item.id, "name": item.name, "description": item.description}
        for item in TIME_FORMATS
    ]
    return ok({"formats": items})


@api_bp.get("/now")
def now() -> Response:
    try:
        zone = _zone()
    except ValueError as exc:
        return fail(InternalAppError(message=str(exc), code="time.invalid_timezone"))
    return ok(_serialize(get_current_time(tz=zone), zone))


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    payload = _parse_payload()
    if isinstance(payload, Response):
        return payload
    try:
        zone = _zone()
    except ValueError as exc:
        return fail(InternalAppError(message=str(exc), code="time.invalid_timezone"))
    try:
        result = convert_time(str(payload.value), payload.from_format, tz=zone)
    except (InvalidDatetimeError, UnknownUnitError) as exc:
        logger.info("rejected %s value %r: %s", payload.from_format, payload.value, exc)
        return fail(exc)
    return ok({"from_format": payload.from_format, **_serialize(result, zone)})


@api_bp.post("/validate")
def validate_endpoint() -> Response:
    payload = _parse_payload()
    if isinstance(payload, Response):
        return payload
    valid = validate_time_value(str(payload.value), payload.from_format)
    return ok({"from_format": payload.from_format, "value": payload.value, "valid": valid})


blueprints = [api_bp]


__all__ = ["blueprints", "formats", "now", "convert_endpoint", "validate_endpoint"]
