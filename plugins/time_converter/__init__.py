"""Time converter plugin manifest."""

manifest = {
    "title": "Time Converter",
    "summary": "Translate between Unix epoch seconds, milliseconds, local and UTC datetimes.",
    "blueprint": "time_converter",
    "category": "Date & Time",
}

__all__ = ["manifest"]
