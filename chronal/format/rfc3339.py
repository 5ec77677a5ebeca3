"""RFC 3339 formatting and parsing.

These are the canonical text layouts of the three value types:

    Date        YYYY-MM-DD                      (RFC 3339 full-date)
    TimeOfDay   HH:MM:SS±HH:MM                  (RFC 3339 time with offset)
    DateTime    YYYY-MM-DDTHH:MM:SS[.f]±HH:MM   (RFC 3339 date-time)

A zero offset is written as "Z". Parsing is strict: the separators,
field widths and the "T"/"Z" letters must match exactly. An optional
decimal fraction is accepted after the seconds of a time or date-time.

Functions:
    format_full_date / parse_full_date
    format_time_of_day / parse_time_of_day
    format_rfc3339 / parse_rfc3339
"""

from __future__ import annotations

import datetime as _datetime
import re

from chronal._internal.constants import REFERENCE_DAY, REFERENCE_MONTH, REFERENCE_YEAR
from chronal.errors import ParseError
from chronal.format.fields import assemble, format_fraction
from chronal.units.timezone import format_offset, utc_offset

DATE_LAYOUT = "YYYY-MM-DD"
TIME_LAYOUT = "HH:MM:SS±HH:MM"
DATETIME_LAYOUT = "YYYY-MM-DDTHH:MM:SS±HH:MM"

_FULL_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)

_TIME_PATTERN = re.compile(
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"(Z|[+-]\d{2}:\d{2})",  # Required offset
    re.ASCII,
)

_RFC3339_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"  # Date: YYYY-MM-DD
    r"T"  # T separator
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"(Z|[+-]\d{2}:\d{2})",  # Required offset
    re.ASCII,
)


def format_full_date(value: _datetime.date) -> str:
    """Format the calendar date of ``value`` as YYYY-MM-DD.

    Examples:
        >>> format_full_date(_datetime.date(2000, 1, 2))
        '2000-01-02'
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_full_date(s: str) -> _datetime.datetime:
    """Parse YYYY-MM-DD into midnight UTC of that date.

    Raises:
        ParseError: If the string deviates from the layout or names an
            impossible date.

    Examples:
        >>> parse_full_date("2000-01-02")
        datetime.datetime(2000, 1, 2, 0, 0, tzinfo=datetime.timezone.utc)
    """
    match = _FULL_DATE_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"invalid date {s!r}: expected {DATE_LAYOUT}")

    year, month, day = (int(g) for g in match.groups())
    return assemble(s, DATE_LAYOUT, year=year, month=month, day=day)


def format_time_of_day(value: _datetime.datetime | _datetime.time) -> str:
    """Format the clock reading of ``value`` as HH:MM:SS±HH:MM.

    Sub-second digits are not written.

    Examples:
        >>> from chronal.units.timezone import UTC
        >>> format_time_of_day(_datetime.datetime(1, 1, 1, 3, 4, 5, tzinfo=UTC))
        '03:04:05Z'
    """
    offset = value.utcoffset() or _datetime.timedelta(0)
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}{format_offset(offset)}"


def parse_time_of_day(
    s: str,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Parse HH:MM:SS±HH:MM onto the reference date.

    Args:
        s: The text to parse.
        tz: Zone to attach when its offset equals the parsed one.

    Raises:
        ParseError: If the string deviates from the layout.

    Examples:
        >>> parse_time_of_day("03:04:05Z").time()
        datetime.time(3, 4, 5)
    """
    match = _TIME_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"invalid time {s!r}: expected {TIME_LAYOUT}")

    hour, minute, second = (int(g) for g in match.groups()[:3])
    return assemble(
        s,
        TIME_LAYOUT,
        year=REFERENCE_YEAR,
        month=REFERENCE_MONTH,
        day=REFERENCE_DAY,
        hour=hour,
        minute=minute,
        second=second,
        fraction=match.group(4),
        offset=match.group(5),
        tz=tz,
    )


def format_rfc3339(value: _datetime.datetime, *, fraction: bool = True) -> str:
    """Format an aware instant as an RFC 3339 date-time.

    Args:
        value: The instant to format.
        fraction: Write sub-second digits (trailing zeros trimmed). When
            False the output stops at whole seconds.

    Examples:
        >>> from chronal.units.timezone import UTC
        >>> dt = _datetime.datetime(2000, 1, 2, 3, 4, 5, 500000, tzinfo=UTC)
        >>> format_rfc3339(dt)
        '2000-01-02T03:04:05.5Z'
        >>> format_rfc3339(dt, fraction=False)
        '2000-01-02T03:04:05Z'
    """
    frac = format_fraction(value.microsecond) if fraction else ""
    return (
        f"{format_full_date(value)}T"
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{frac}{format_offset(utc_offset(value))}"
    )


def parse_rfc3339(
    s: str,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Parse an RFC 3339 date-time.

    Args:
        s: The text to parse.
        tz: Zone to attach when its offset equals the parsed one.

    Returns:
        An aware instant.

    Raises:
        ParseError: If the string is not valid RFC 3339.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45+05:30").utcoffset()
        datetime.timedelta(seconds=19800)

        >>> parse_rfc3339("2024-01-15 14:30:45Z")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: invalid date-time...
    """
    match = _RFC3339_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"invalid date-time {s!r}: expected {DATETIME_LAYOUT}")

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    return assemble(
        s,
        DATETIME_LAYOUT,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        fraction=match.group(7),
        offset=match.group(8),
        tz=tz,
    )


__all__ = [
    "DATE_LAYOUT",
    "TIME_LAYOUT",
    "DATETIME_LAYOUT",
    "format_full_date",
    "parse_full_date",
    "format_time_of_day",
    "parse_time_of_day",
    "format_rfc3339",
    "parse_rfc3339",
]
