"""Date calculator plugin manifest."""

manifest = {
    "title": "Date Calculator",
    "summary": "Count the days between two dates or move a date forward and back by whole days.",
    "blueprint": "date_calculator",
    "category": "Date & Time",
}

__all__ = ["manifest"]
