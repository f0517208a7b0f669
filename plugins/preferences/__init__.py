"""Unit preferences plugin manifest."""

manifest = {
    "title": "Preferences",
    "summary": "Remember the default unit or mode shown for each converter category.",
    "blueprint": "preferences",
    "category": "Settings",
}

__all__ = ["manifest"]
