"""Validation primitives for plugin APIs."""

from __future__ import annotations

from typing import Annotated, Any, Mapping, TypeVar

import pydantic
from pydantic import BaseModel, Field


class ValidationError(ValueError):
    """Raised when validation fails."""

    def __init__(self, message: str, *, details: Any | None = None):
        super().__init__(message)
        self.details = details


class SchemaModel(BaseModel):
    """Strict base model for request/response validation."""

    model_config = pydantic.ConfigDict(extra="forbid", str_strip_whitespace=True)


# NaN and infinities are rejected before they reach any formula.
FiniteNumber = Annotated[float, Field(allow_inf_nan=False)]


TModel = TypeVar("TModel", bound=SchemaModel)


def parse_model(model: type[TModel], payload: Mapping[str, Any] | None) -> TModel:
    payload = payload or {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(
            "Invalid request payload",
            details=exc.errors(include_url=False, include_context=False),
        ) from exc


__all__ = ["ValidationError", "SchemaModel", "FiniteNumber", "parse_model"]
