"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Convert length, volume, weight and temperature values into every other unit of the category.",
    "blueprint": "unit_converter",
    "category": "Measurement",
    "categories": ["length", "volume", "weight", "temperature"],
}


__all__ = ["manifest"]
