"""
Value coercion for raw records.

Persisted records are loosely typed: grade levels arrive as "8" or 8,
period grades as 91.5, "91.5", "" or garbage. These helpers turn them into
Python numbers or None, never raising.
"""

import math
from typing import Optional


def to_number_or_none(value) -> Optional[float]:
    """
    Parse a grade value into a finite number.

    Numbers pass through, numeric strings are parsed, everything else
    (None, booleans, blanks, NaN, infinities, junk) becomes None.
    A value that cannot be parsed is treated as absent, never as zero.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    return None


def to_int_or_none(value) -> Optional[int]:
    """Parse a level field ("8", 8, 8.0) into an int, or None."""
    number = to_number_or_none(value)
    if number is None or number != int(number):
        return None
    return int(number)
