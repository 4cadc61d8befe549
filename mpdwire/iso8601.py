"""Conversion between ISO 8601 time stamps and POSIX UTC time stamps."""

from __future__ import annotations

import calendar
import re
from datetime import datetime, timezone

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")


def _parse_number(text: str, pos: int) -> tuple[int | None, int]:
    """Parse an integer at *pos*; return (value, end), or (None, pos) without digits."""
    match = _NUMBER.match(text, pos)
    if match is None:
        return None, pos
    sign, digits = match.groups()
    value = int(digits)
    return (-value if sign == "-" else value), match.end()


def _invalid(text: str) -> ValueError:
    return ValueError(f"invalid ISO 8601 time stamp: {text!r}")


def parse_datetime(text: str) -> int:
    """Parse "YYYY-MM-DDTHH:MM:SS" (optionally ending in "Z") as a UTC time stamp.

    The time zone is always taken to be UTC.  Raises :class:`ValueError`
    if the text is not a time stamp in that form.
    """
    year, pos = _parse_number(text, 0)
    if year is None or not 1970 <= year < 3000 or text[pos : pos + 1] != "-":
        raise _invalid(text)

    month, pos = _parse_number(text, pos + 1)
    if month is None or not 1 <= month <= 12 or text[pos : pos + 1] != "-":
        raise _invalid(text)

    day, pos = _parse_number(text, pos + 1)
    if day is None or not 1 <= day <= 31 or text[pos : pos + 1] != "T":
        raise _invalid(text)

    hour, pos = _parse_number(text, pos + 1)
    if hour is None or hour >= 24 or text[pos : pos + 1] != ":":
        raise _invalid(text)

    minute, pos = _parse_number(text, pos + 1)
    if minute is None or minute >= 60 or text[pos : pos + 1] != ":":
        raise _invalid(text)

    second, pos = _parse_number(text, pos + 1)
    if second is None or second >= 60 or text[pos : pos + 1] not in ("", "Z"):
        raise _invalid(text)

    # timegm normalises out-of-range fields the way mktime() does
    return calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))


def format_datetime(timestamp: int) -> str:
    """Format a POSIX UTC time stamp as "YYYY-MM-DDTHH:MM:SSZ".

    Raises :class:`ValueError` if the time stamp cannot be represented.
    """
    try:
        tm = datetime.fromtimestamp(timestamp, timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"time stamp out of range: {timestamp!r}") from exc
    return (
        f"{tm.year:04d}-{tm.month:02d}-{tm.day:02d}"
        f"T{tm.hour:02d}:{tm.minute:02d}:{tm.second:02d}Z"
    )