"""Unit conversion table for the `convert` tool."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from nl2sql_toolbox.exceptions import UnsupportedConversionError

Converter = Callable[[float], float]

CONVERSIONS: Final[dict[tuple[str, str], Converter]] = {
    ("celsius", "fahrenheit"): lambda c: c * 9 / 5 + 32,
    ("fahrenheit", "celsius"): lambda f: (f - 32) * 5 / 9,
    ("kilometers", "miles"): lambda km: km * 0.621371,
    ("miles", "kilometers"): lambda mi: mi * 1.60934,
    ("kilograms", "pounds"): lambda kg: kg * 2.20462,
    ("pounds", "kilograms"): lambda lb: lb * 0.453592,
    ("meters", "feet"): lambda m: m * 3.28084,
    ("feet", "meters"): lambda ft: ft * 0.3048,
    ("liters", "gallons"): lambda l: l * 0.264172,  # noqa: E741
    ("gallons", "liters"): lambda gal: gal * 3.78541,
}


def _normalize(unit: str) -> str:
    return unit.strip().lower()


def supported_pairs() -> list[tuple[str, str]]:
    """Return the supported (from, to) unit pairs."""
    return sorted(CONVERSIONS)


def convert_value(value: float, from_unit: str, to_unit: str) -> float:
    """Convert ``value`` between two units.

    Unit names are matched case-insensitively.

    Raises:
        UnsupportedConversionError: If no conversion exists for the pair
    """
    converter = CONVERSIONS.get((_normalize(from_unit), _normalize(to_unit)))
    if converter is None:
        raise UnsupportedConversionError(from_unit, to_unit)
    return converter(value)
