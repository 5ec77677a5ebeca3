"""SQL dialect layouts.

Common SQL engines read and write times in a slightly different shape
than RFC 3339: a space between date and time, sub-second digits for
time columns, and offsets written as bare hours.

    Date        YYYY-MM-DD
    TimeOfDay   HH:MM:SS[.ffffff]±HH[:MM]
    DateTime    YYYY-MM-DD HH:MM:SS±HH[:MM]

The ``:MM`` part of an offset is only written for zones that are not a
whole number of hours away from UTC, which is also what PostgreSQL
emits. Parsing accepts an optional fraction on date-times and an
optional ``:MM`` on offsets.
"""

from __future__ import annotations

import datetime as _datetime
import re

from chronal._internal.constants import (
    REFERENCE_DAY,
    REFERENCE_MONTH,
    REFERENCE_YEAR,
    SQL_TIME_FRACTION_DIGITS,
)
from chronal.errors import ParseError
from chronal.format.fields import assemble, format_fraction
from chronal.format.rfc3339 import format_full_date, parse_full_date
from chronal.units.timezone import format_offset, utc_offset

SQL_DATE_LAYOUT = "YYYY-MM-DD"
SQL_TIME_LAYOUT = "HH:MM:SS.ffffff±HH"
SQL_DATETIME_LAYOUT = "YYYY-MM-DD HH:MM:SS±HH"

_SQL_TIME_PATTERN = re.compile(
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"([+-]\d{2}(?::\d{2})?)",  # Offset: ±HH or ±HH:MM
    re.ASCII,
)

_SQL_DATETIME_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})"  # Date: YYYY-MM-DD
    r" "  # Space separator
    r"(\d{2}):(\d{2}):(\d{2})"  # Time: HH:MM:SS
    r"(?:\.(\d{1,9}))?"  # Optional fractional seconds
    r"([+-]\d{2}(?::\d{2})?)",  # Offset: ±HH or ±HH:MM
    re.ASCII,
)


def format_sql_date(value: _datetime.date) -> str:
    """Format a date for a SQL DATE parameter."""
    return format_full_date(value)


def parse_sql_date(s: str) -> _datetime.datetime:
    """Parse a SQL DATE column value into midnight UTC."""
    return parse_full_date(s)


def format_sql_time(value: _datetime.datetime) -> str:
    """Format a clock reading for a SQL TIME WITH TIME ZONE parameter.

    Examples:
        >>> from chronal.units.timezone import UTC
        >>> format_sql_time(_datetime.datetime(1, 1, 1, 3, 4, 5, tzinfo=UTC))
        '03:04:05+00'
        >>> format_sql_time(_datetime.datetime(1, 1, 1, 3, 4, 5, 250000, tzinfo=UTC))
        '03:04:05.25+00'
    """
    return (
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{format_fraction(value.microsecond, SQL_TIME_FRACTION_DIGITS)}"
        f"{format_offset(utc_offset(value), zulu=False, short=True)}"
    )


def parse_sql_time(s: str) -> _datetime.datetime:
    """Parse a SQL TIME WITH TIME ZONE value onto the reference date.

    Raises:
        ParseError: If the string deviates from the layout.
    """
    match = _SQL_TIME_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"invalid SQL time {s!r}: expected {SQL_TIME_LAYOUT}")

    hour, minute, second = (int(g) for g in match.groups()[:3])
    return assemble(
        s,
        SQL_TIME_LAYOUT,
        year=REFERENCE_YEAR,
        month=REFERENCE_MONTH,
        day=REFERENCE_DAY,
        hour=hour,
        minute=minute,
        second=second,
        fraction=match.group(4),
        offset=match.group(5),
    )


def format_sql_datetime(value: _datetime.datetime) -> str:
    """Format an instant for a SQL TIMESTAMP WITH TIME ZONE parameter.

    Sub-second digits are not written.

    Examples:
        >>> from chronal.units.timezone import UTC
        >>> format_sql_datetime(_datetime.datetime(2000, 1, 2, 3, 4, 5, tzinfo=UTC))
        '2000-01-02 03:04:05+00'
    """
    return (
        f"{format_full_date(value)} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{format_offset(utc_offset(value), zulu=False, short=True)}"
    )


def parse_sql_datetime(s: str) -> _datetime.datetime:
    """Parse a SQL TIMESTAMP WITH TIME ZONE value.

    Raises:
        ParseError: If the string deviates from the layout.
    """
    match = _SQL_DATETIME_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(
            f"invalid SQL datetime {s!r}: expected {SQL_DATETIME_LAYOUT}"
        )

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    return assemble(
        s,
        SQL_DATETIME_LAYOUT,
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        fraction=match.group(7),
        offset=match.group(8),
    )


__all__ = [
    "SQL_DATE_LAYOUT",
    "SQL_TIME_LAYOUT",
    "SQL_DATETIME_LAYOUT",
    "format_sql_date",
    "parse_sql_date",
    "format_sql_time",
    "parse_sql_time",
    "format_sql_datetime",
    "parse_sql_datetime",
]
