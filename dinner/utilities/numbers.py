"""Numeric helpers for ingredient amounts.

Amounts are stored as text. Adding two of them means parsing a leading number
out of each string and writing the sum back in its plain default form
("3", "2.5", "0.30000000000000004"), never with fixed decimals.
"""
import math
import re
from decimal import Decimal
from typing import Optional

_NUMERIC_PREFIX = re.compile(r'^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')


def parse_amount(text) -> Optional[float]:
    """Return the leading number of ``text`` or None when there is none.

    "2" -> 2.0, " 1.5 " -> 1.5, ".5" -> 0.5, "2 cups" -> 2.0,
    "to taste" -> None, "" -> None.
    """
    if isinstance(text, bool):
        return None
    if isinstance(text, (int, float)):
        return None if math.isnan(text) else float(text)
    if not isinstance(text, str):
        return None
    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


def format_number(value: float) -> str:
    """Default string form of a number (integral values without '.0')."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value) and abs(value) < 1e21:
        return str(int(value))
    text = repr(float(value))
    if 'e' in text:
        mantissa, exponent = text.split('e')
        exp = int(exponent)
        if -6 <= exp < 21:
            return format(Decimal(text), 'f')
        return f"{mantissa}e{exp:+d}"
    return text


__all__ = ['parse_amount', 'format_number']
