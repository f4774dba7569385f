"""Tests for the utility tool handlers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from nl2sql_toolbox.exceptions import DateParseError, UnsupportedConversionError
from nl2sql_toolbox.utilities import calculate, convert, echo, format_date_text
from nl2sql_toolbox.utilities.dates import format_date, parse_date
from nl2sql_toolbox.utilities.units import CONVERSIONS, convert_value, supported_pairs


def test_echo() -> None:
    assert echo("hello") == "Tool echo: hello"
    assert echo("") == "Tool echo: "


def test_calculate_results() -> None:
    assert calculate("2+2") == "Result: 4"
    assert calculate("DROP TABLE x;1+1") == "Result: 2"
    assert calculate("1/0") == "Result: Infinity"
    assert calculate("0/0") == "Result: NaN"
    assert calculate("7/2") == "Result: 3.5"


def test_calculate_errors_are_text() -> None:
    assert calculate("abc") == "Error: Could not evaluate expression 'abc'"
    assert calculate("2+") == "Error: Could not evaluate expression '2+'"


def test_calculate_strict_mode() -> None:
    assert calculate("1,000+1", strict=True) == (
        "Error: Expression '1,000+1' contains unsupported characters: ,"
    )
    assert calculate("1,000+1") == "Result: 1001"


@pytest.mark.parametrize(
    "value,from_unit,to_unit,expected",
    [
        (0, "celsius", "fahrenheit", "0 celsius = 32.0000 fahrenheit"),
        (100, "Celsius", "Fahrenheit", "100 Celsius = 212.0000 Fahrenheit"),
        (212, "fahrenheit", "celsius", "212 fahrenheit = 100.0000 celsius"),
        (10, "kilometers", "miles", "10 kilometers = 6.2137 miles"),
        (1.5, "kilograms", "pounds", "1.5 kilograms = 3.3069 pounds"),
        (2, "pounds", "kilograms", "2 pounds = 0.9072 kilograms"),
    ],
)
def test_convert(value: float, from_unit: str, to_unit: str, expected: str) -> None:
    assert convert(value, from_unit, to_unit) == expected


def test_convert_accepts_plain_int() -> None:
    value: int = 0
    assert convert(value, "celsius", "fahrenheit") == "0 celsius = 32.0000 fahrenheit"
    assert convert(3, "meters", "feet") == "3 meters = 9.8425 feet"


def test_convert_overflow_renders_infinity() -> None:
    assert convert(1e308, "kilograms", "pounds") == "1e+308 kilograms = Infinity pounds"
    assert convert(-1e308, "kilograms", "pounds") == (
        "-1e+308 kilograms = -Infinity pounds"
    )


def test_convert_unsupported_pair_names_both_units() -> None:
    assert convert(10, "celsius", "kelvin") == (
        "Error: Conversion from celsius to kelvin is not supported."
    )
    with pytest.raises(UnsupportedConversionError):
        convert_value(10, "celsius", "kelvin")


@pytest.mark.parametrize("pair", supported_pairs())
def test_conversions_are_monotonic(pair: tuple[str, str]) -> None:
    fn = CONVERSIONS[pair]
    assert fn(-10.0) < fn(0.0) < fn(1.0) < fn(250.0)


@pytest.mark.parametrize("pair", supported_pairs())
def test_round_trip_matches_formula_at_four_decimals(pair: tuple[str, str]) -> None:
    forward = CONVERSIONS[pair]
    backward = CONVERSIONS[(pair[1], pair[0])]
    value = 37.5
    there = forward(value)
    back = backward(there)
    assert convert(value, *pair).endswith(f"= {there:.4f} {pair[1]}")
    assert convert(there, pair[1], pair[0]).endswith(f"= {back:.4f} {pair[0]}")
    assert back == pytest.approx(value, rel=1e-4)


def test_format_date_pattern() -> None:
    assert format_date_text("2024-01-15T10:30:00", "YYYY-MM-DD") == "2024-01-15"
    assert format_date_text("2024-01-15T10:30:05", "DD/MM/YYYY HH:mm:ss") == (
        "15/01/2024 10:30:05"
    )
    assert format_date_text("2024-03-07", "YYYY.MM.DD") == "2024.03.07"


def test_format_date_iso_output_is_utc() -> None:
    assert format_date_text("2024-01-15T10:30:00Z") == "2024-01-15T10:30:00.000Z"
    assert format_date_text("2024-01-15T10:30:00.123456+02:00") == "2024-01-15T08:30:00.123Z"


def test_format_date_defaults_to_now() -> None:
    now = datetime(2030, 6, 1, 9, 5, 3, tzinfo=UTC)
    assert format_date(None, "YYYY-MM-DD HH:mm", now=now) == (
        now.astimezone().strftime("%Y-%m-%d %H:%M")
    )
    assert format_date(None, "YYYY-MM-DD HH:mm", now=datetime(2030, 6, 1, 9, 5)) == (
        "2030-06-01 09:05"
    )
    assert format_date(None, None, now=now) == "2030-06-01T09:05:03.000Z"


def test_format_date_current_time_without_args() -> None:
    text = format_date_text()
    assert text.endswith("Z")
    parsed = parse_date(text)
    assert abs(datetime.now(UTC) - parsed) < timedelta(minutes=1)


def test_format_date_invalid_input() -> None:
    assert format_date_text("not a date", "YYYY") == (
        "Error formatting date: Invalid date 'not a date'"
    )
    with pytest.raises(DateParseError):
        parse_date("2024-13-45")


def test_format_date_edge_of_range() -> None:
    assert format_date_text("9999-12-31T23:59:59-14:00") == (
        "Error formatting date: Date '9999-12-31T23:59:59-14:00' is out of range"
    )
    assert format_date_text("9999-12-31T23:59:59-14:00", "YYYY-MM-DD") == "9999-12-31"
