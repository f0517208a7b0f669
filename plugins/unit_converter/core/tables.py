"""Unit tables for the linear categories.

Each factor is the size of one unit in the category's base unit: meters for
length, liters for volume and kilograms for weight.
"""

from __future__ import annotations

from .engine import LinearCategory, Unit

LENGTH_UNITS: tuple[Unit, ...] = (
    Unit("kilometer", "Kilometers", "km", 1000),
    Unit("mile", "Miles", "mi", 1609.344),
    Unit("inch", "Inches", "in", 0.0254),
    Unit("foot", "Feet", "ft", 0.3048),
    Unit("yard", "Yards", "yd", 0.9144),
    Unit("millimeter", "Millimeters", "mm", 0.001),
    Unit("centimeter", "Centimeters", "cm", 0.01),
    Unit("meter", "Meters", "m", 1),
)

# US liquid measures.
VOLUME_UNITS: tuple[Unit, ...] = (
    Unit("milliliter", "Milliliters", "mL", 0.001),
    Unit("liter", "Liters", "L", 1),
    Unit("fluidOunce", "Fluid Ounces", "fl oz", 0.0295735),
    Unit("cup", "Cups", "cup", 0.236588),
    Unit("pint", "Pints", "pt", 0.473176),
    Unit("quart", "Quarts", "qt", 0.946353),
    Unit("gallon", "Gallons", "gal", 3.78541),
)

WEIGHT_UNITS: tuple[Unit, ...] = (
    Unit("gram", "Grams", "g", 0.001),
    Unit("kilogram", "Kilograms", "kg", 1),
    Unit("metricTon", "Metric Tons", "t", 1000),
    Unit("ounce", "Ounces", "oz", 0.0283495),
    Unit("pound", "Pounds", "lb", 0.453592),
    Unit("usTon", "US Tons", "ton", 907.185),
    Unit("stone", "Stone", "st", 6.35029),
)


LENGTH = LinearCategory("length", "Length", "meter", LENGTH_UNITS)
VOLUME = LinearCategory("volume", "Volume", "liter", VOLUME_UNITS)
WEIGHT = LinearCategory("weight", "Weight", "kilogram", WEIGHT_UNITS)


__all__ = [
    "LENGTH_UNITS",
    "VOLUME_UNITS",
    "WEIGHT_UNITS",
    "LENGTH",
    "VOLUME",
    "WEIGHT",
]
