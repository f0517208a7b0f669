"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, jsonify

from .errors import AppError, ConversionError, to_app_error


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    payload = {"success": True, "data": data}
    response = jsonify(payload)
    response.status_code = status
    return response


def fail(
    error: AppError | ConversionError | Mapping[str, Any],
    *,
    status: int | None = None,
) -> Response:
    """Return a standardized failure envelope.

    Domain errors raised by the conversion engines are translated with
    :func:`common.errors.to_app_error` so blueprints can pass them through
    unchanged.
    """

    if isinstance(error, ConversionError):
        error = to_app_error(error)

    if isinstance(error, AppError):
        payload = {"success": False, "error": error.to_dict()}
        response = jsonify(payload)
        response.status_code = status or error.status_code
        return response

    payload = {"success": False, "error": dict(error)}
    response = jsonify(payload)
    response.status_code = status or 400
    return response


__all__ = ["ok", "fail"]
