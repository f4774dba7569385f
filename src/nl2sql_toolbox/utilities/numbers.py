"""Rendering of numeric tool results as text."""

from __future__ import annotations

from decimal import Decimal
import math
import re

_EXPONENT_PATTERN = re.compile(r"e([+-])0*(\d+)")

# Bounds outside which numbers are rendered in exponent notation.
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21


def format_number(value: float) -> str:
    """Render a float the way callers of the tools expect to read it.

    Integral values print without a fractional part (``4`` not ``4.0``),
    other values use the shortest repr that round-trips, and non-finite
    values print as ``Infinity``, ``-Infinity`` or ``NaN``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if value.is_integer() and magnitude < _POSITIONAL_MAX:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    if _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
        return format(Decimal(text), "f")
    return _EXPONENT_PATTERN.sub(r"e\1\2", text)
