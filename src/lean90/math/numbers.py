"""Numeric helpers shared by the estimator, the aggregator and the reducers.

User input arrives as free text from form fields. Nothing here raises on bad
input: non-numeric or non-finite values collapse to a fallback (or ``None``).
"""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into [low, high]."""
    return max(low, min(high, value))


def round1(value: float) -> float:
    """Round to one decimal, halves away from zero for positives (3.25 -> 3.3).

    Python's ``round`` uses banker's rounding, which would show 3.2 for 3.25.
    """
    return math.floor(value * 10 + 0.5) / 10


def parse_number(value: object) -> float | None:
    """Parse *value* as a finite float, or return None.

    Accepts ints, floats and numeric strings (surrounding whitespace allowed,
    ``,`` accepted as the decimal separator). Booleans are not numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def coerce_number(value: object, fallback: float = 0.0) -> float:
    """Parse *value* as a finite float, falling back to *fallback*."""
    number = parse_number(value)
    return fallback if number is None else number
