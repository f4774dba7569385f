"""Date parsing and pattern formatting for the `format-date` tool.

Input dates are ISO-8601 strings. Naive values are taken as local time and
aware values are shifted to local time before pattern formatting. Without
a pattern the moment is rendered as a UTC timestamp with millisecond
precision, e.g. ``2024-01-15T10:30:00.000Z``.
"""

from __future__ import annotations

import contextlib
from datetime import UTC, datetime
import re
from typing import Final

from nl2sql_toolbox.exceptions import DateParseError

_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"YYYY|MM|DD|HH|mm|ss")


def parse_date(text: str) -> datetime:
    """Parse an ISO-8601 date or date-time string.

    A trailing ``Z`` designator is accepted as UTC.

    Raises:
        DateParseError: If the text is not a recognizable date
    """
    raw = text.strip()
    if raw[-1:] in {"Z", "z"}:
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        msg = f"Invalid date '{text}'"
        raise DateParseError(msg) from exc


def apply_pattern(moment: datetime, pattern: str) -> str:
    """Substitute ``YYYY MM DD HH mm ss`` tokens with zero-padded components."""
    values = {
        "YYYY": f"{moment.year:04d}",
        "MM": f"{moment.month:02d}",
        "DD": f"{moment.day:02d}",
        "HH": f"{moment.hour:02d}",
        "mm": f"{moment.minute:02d}",
        "ss": f"{moment.second:02d}",
    }
    return _TOKEN_PATTERN.sub(lambda m: values[m.group()], pattern)


def to_utc_timestamp(moment: datetime) -> str:
    """Render a moment as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC."""
    utc = moment.astimezone(UTC)
    millis = utc.microsecond // 1000
    return f"{utc.year:04d}-{utc:%m-%dT%H:%M:%S}.{millis:03d}Z"


def format_date(
    date: str | None = None,
    pattern: str | None = None,
    *,
    now: datetime | None = None,
) -> str:
    """Format a date string (or the current time) with an optional pattern.

    Args:
        date: ISO-8601 input; the current time is used when empty
        pattern: Token pattern such as ``YYYY-MM-DD``; a UTC timestamp when empty
        now: Override for the current time

    Raises:
        DateParseError: If ``date`` cannot be parsed or represented
    """
    if date:
        moment = parse_date(date)
    else:
        moment = now or datetime.now().astimezone()

    try:
        if pattern:
            if moment.tzinfo is not None:
                # Keep the input offset when local time would leave the datetime range
                with contextlib.suppress(OverflowError):
                    moment = moment.astimezone()
            return apply_pattern(moment, pattern)
        return to_utc_timestamp(moment)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"Date '{date}' is out of range"
        raise DateParseError(msg) from exc
