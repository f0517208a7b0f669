"""API routes for the number tools plugin."""

from __future__ import annotations

import math

from flask import Blueprint, Response, request

from common.errors import InvalidInputError, ValidationAppError
from common.responses import fail, ok
from common.validation import FiniteNumber, SchemaModel, ValidationError, parse_model

from ..core import compare_numbers, compute_adjustment


class ComparePayload(SchemaModel):
    first: FiniteNumber
    second: FiniteNumber


class AdjustPayload(SchemaModel):
    base: FiniteNumber
    percent: FiniteNumber


api_bp = Blueprint("number_tools_api", __name__, url_prefix="/api/number_tools")


def _invalid_request(exc: ValidationError) -> Response:
    return fail(
        ValidationAppError(
            message=str(exc),
            code="number.invalid_request",
            details={"errors": getattr(exc, "details", None)},
        )
    )


def _check_finite(**values: float) -> None:
    # Finite operands can still overflow, e.g. 1e308 * 2.
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} overflowed to {value!r}")


@api_bp.post("/compare")
def compare_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ComparePayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = compare_numbers(payload.first, payload.second)
    try:
        _check_finite(diff=result.diff, percent=result.percent)
    except InvalidInputError as exc:
        return fail(exc)
    return ok(result.to_dict())


@api_bp.post("/adjust")
def adjust_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(AdjustPayload, raw_payload)
    except ValidationError as exc:
        return _invalid_request(exc)
    result = compute_adjustment(payload.base, payload.percent)
    try:
        _check_finite(result=result.result)
    except InvalidInputError as exc:
        return fail(exc)
    return ok(result.to_dict())


blueprints = [api_bp]


__all__ = ["blueprints", "compare_endpoint", "adjust_endpoint"]
