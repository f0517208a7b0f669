"""Number tools plugin manifest."""

manifest = {
    "title": "Number Tools",
    "summary": "Compare two numbers or move a number up or down by a percentage.",
    "blueprint": "number_tools",
    "category": "General Utilities",
}

__all__ = ["manifest"]
