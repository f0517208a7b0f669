"""API routes for stored unit preferences."""

from __future__ import annotations

import threading

from flask import Blueprint, Response, current_app, request

from common.errors import NotFoundAppError, UnknownUnitError, ValidationAppError
from common.responses import fail, ok
from common.validation import SchemaModel, ValidationError, parse_model

from ..core import PreferenceStore, build_store, normalize_preferences, preference_options

STORE_EXTENSION = "preference_store"
_store_lock = threading.Lock()


class PreferencesPayload(SchemaModel):
    preferences: dict[str, str]


api_bp = Blueprint("preferences_api", __name__, url_prefix="/api/preferences")


def get_store() -> PreferenceStore:
    store = current_app.extensions.get(STORE_EXTENSION)
    if store is not None:
        return store
    with _store_lock:
        store = current_app.extensions.get(STORE_EXTENSION)
        if store is None:
            settings = current_app.config.get("PLUGIN_SETTINGS", {}).get("preferences", {})
            path = settings.get("path") or current_app.config.get("PREFERENCES_PATH")
            store = build_store(path)
            current_app.extensions[STORE_EXTENSION] = store
    return store


@api_bp.get("")
def list_preferences() -> Response:
    store = get_store()
    return ok(
        {
            "preferences": store.snapshot(),
            "defaults": store.defaults,
            "options": preference_options(),
        }
    )


@api_bp.get("/<category>")
def get_preference(category: str) -> Response:
    value = get_store().get(category)
    if value is None:
        return fail(
            NotFoundAppError(
                message=f"Unknown preference '{category}'",
                code="preferences.unknown_key",
                details={"category": category},
            )
        )
    return ok({"category": category, "value": value})


@api_bp.put("")
def update_preferences() -> Response:
    raw_payload = request.get_json(silent=True) or {}
    try:
        payload = parse_model(PreferencesPayload, raw_payload)
        updates = normalize_preferences(payload.preferences)
    except ValidationError as exc:
        return fail(
            ValidationAppError(
                message=str(exc),
                code="preferences.invalid_request",
                details={"errors": getattr(exc, "details", None)},
            )
        )
    try:
        snapshot = get_store().update(updates)
    except UnknownUnitError as exc:
        return fail(exc, status=400)
    return ok({"preferences": snapshot})


@api_bp.delete("")
def reset_preferences() -> Response:
    return ok({"preferences": get_store().reset()})


blueprints = [api_bp]


__all__ = [
    "blueprints",
    "get_store",
    "list_preferences",
    "get_preference",
    "update_preferences",
    "reset_preferences",
]
