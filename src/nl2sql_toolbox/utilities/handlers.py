"""Text-producing handlers for the utility tools.

Each handler returns the tool's text result. Failures are reported as
text (an in-band error), never raised to the caller.
"""

from __future__ import annotations

import math

from nl2sql_toolbox.constants import Constants
from nl2sql_toolbox.exceptions import (
    DateParseError,
    ExpressionError,
    UnsupportedCharacterError,
    UnsupportedConversionError,
)
from nl2sql_toolbox.utilities.arithmetic import evaluate
from nl2sql_toolbox.utilities.dates import format_date
from nl2sql_toolbox.utilities.numbers import format_number
from nl2sql_toolbox.utilities.units import convert_value


def echo(message: str) -> str:
    """Return the message with the echo label."""
    return f"{Constants.ECHO_PREFIX}{message}"


def calculate(expression: str, *, strict: bool = False) -> str:
    """Evaluate an arithmetic expression and render the result."""
    try:
        value = evaluate(expression, strict=strict)
    except UnsupportedCharacterError as exc:
        return f"Error: {exc}"
    except ExpressionError:
        return f"Error: Could not evaluate expression '{expression}'"
    return f"{Constants.RESULT_PREFIX}{format_number(value)}"


def convert(value: float, from_unit: str, to_unit: str) -> str:
    """Convert a value between units, formatted to 4 decimal places."""
    try:
        result = convert_value(value, from_unit, to_unit)
    except UnsupportedConversionError as exc:
        return f"Error: {exc}"
    rendered = f"{result:.4f}" if math.isfinite(result) else format_number(result)
    return f"{format_number(value)} {from_unit} = {rendered} {to_unit}"


def format_date_text(date: str | None = None, pattern: str | None = None) -> str:
    """Format a date, or the current time, per the optional pattern."""
    try:
        return format_date(date, pattern)
    except DateParseError as exc:
        return f"Error formatting date: {exc}"
