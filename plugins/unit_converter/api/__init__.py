"""Unit converter API with standardized responses."""

from __future__ import annotations

from flask import Blueprint, Response, request

from common.errors import ConversionError, NotFoundAppError, ValidationAppError
from common.forms import get_float, get_str
from common.logging import get_logger
from common.responses import fail, ok
from common.validation import FiniteNumber, SchemaModel, ValidationError, parse_model

from ..core import CATEGORIES, convert, get_category

logger = get_logger(__name__)


class ConvertPayload(SchemaModel):
    category: str
    value: FiniteNumber
    from_unit: str


api_bp = Blueprint("unit_converter_api", __name__, url_prefix="/api/unit_converter")


def _unknown_category(category: str) -> Response:
    return fail(
        NotFoundAppError(
            message=f"Unknown category '{category}'",
            code="unit.invalid_category",
            details={"category": category},
        )
    )


def _conversion_response(category: str, value: float, from_unit: str) -> Response:
    if category not in CATEGORIES:
        return _unknown_category(category)
    try:
        results = convert(category, value, from_unit)
    except ConversionError as exc:
        logger.info("rejected conversion: %s", exc)
        return fail(exc)
    source_id = get_category(category).table.resolve(from_unit)
    return ok(
        {
            "category": category,
            "value": value,
            "from_unit": source_id,
            "results": [result.to_dict() for result in results],
        }
    )


@api_bp.get("/categories")
def categories() -> Response:
    payload = [engine.describe() for engine in CATEGORIES.values()]
    return ok({"categories": payload})


@api_bp.get("/units/<category>")
def units_endpoint(category: str) -> Response:
    if category not in CATEGORIES:
        return _unknown_category(category)
    engine = CATEGORIES[category]
    return ok({**engine.describe(), "names": engine.unit_names()})


@api_bp.post("/convert")
def convert_endpoint() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(ConvertPayload, raw_payload)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="unit.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )
    return _conversion_response(payload.category, payload.value, payload.from_unit)


@api_bp.get("/convert/<category>")
def convert_query_endpoint(category: str) -> Response:
    try:
        value = get_float(request.args, "value")
        from_unit = get_str(request.args, "unit")
    except ValidationError as exc:
        return fail(ValidationAppError(message=str(exc), code="unit.invalid_request"))
    return _conversion_response(category, value, from_unit)


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "categories",
    "units_endpoint",
    "convert_endpoint",
    "convert_query_endpoint",
]
