"""Display formatting shared by every conversion category."""

from __future__ import annotations

import math

from .errors import InvalidInputError

# Chained multiply/divide conversions leave noise such as 99.99999999999999.
WHOLE_NUMBER_TOLERANCE = 0.0001


def is_whole_number(num: float) -> bool:
    return abs(num - round(num)) < WHOLE_NUMBER_TOLERANCE


def format_number(num: float) -> str:
    """Format ``num`` for display with US-style grouping.

    Whole numbers (within :data:`WHOLE_NUMBER_TOLERANCE`) render without a
    decimal point, everything else with exactly two decimals::

        >>> format_number(1000)
        '1,000'
        >>> format_number(10.999)
        '11.00'

    The grouping and decimal separators are fixed and never depend on the
    process locale. Non-finite values raise :class:`InvalidInputError`.
    """

    if isinstance(num, bool) or not isinstance(num, (int, float)):
        raise InvalidInputError(f"Cannot format non-numeric value {num!r}")
    if not math.isfinite(num):
        raise InvalidInputError(f"Cannot format non-finite value {num!r}")
    if is_whole_number(num):
        return f"{int(round(num)):,}"
    return f"{num:,.2f}"


def format_fixed(num: float, decimals: int = 2) -> str:
    """Format ``num`` with a fixed number of decimals and no grouping."""

    if not math.isfinite(num):
        raise InvalidInputError(f"Cannot format non-finite value {num!r}")
    if decimals < 0:
        raise InvalidInputError("Decimal precision must be non-negative.")
    return f"{num:.{decimals}f}"


def format_integer(num: int) -> str:
    return f"{num:,}"


__all__ = [
    "WHOLE_NUMBER_TOLERANCE",
    "is_whole_number",
    "format_number",
    "format_fixed",
    "format_integer",
]
