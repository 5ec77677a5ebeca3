"""Text formatting and parsing.

This module provides functions for converting instants to and from
string representations:
    - RFC 3339 layouts (the canonical text of every value type)
    - SQL dialect layouts (used only by ``sql_value`` and ``scan``)
    - strftime-style layouts

Functions:
    format_full_date / parse_full_date: YYYY-MM-DD.
    format_time_of_day / parse_time_of_day: HH:MM:SS±HH:MM.
    format_rfc3339 / parse_rfc3339: RFC 3339 date-time.
    format_sql_date / parse_sql_date: SQL DATE.
    format_sql_time / parse_sql_time: SQL TIME WITH TIME ZONE.
    format_sql_datetime / parse_sql_datetime: SQL TIMESTAMP WITH TIME ZONE.
    format_layout / parse_layout: strftime directives.

Examples:
    >>> from chronal.format import parse_rfc3339, format_sql_datetime

    >>> dt = parse_rfc3339("2024-01-15T14:30:45Z")
    >>> dt.year
    2024

    >>> format_sql_datetime(dt)
    '2024-01-15 14:30:45+00'
"""

from __future__ import annotations

from chronal.format.layout import format_layout, parse_layout
from chronal.format.rfc3339 import (
    DATE_LAYOUT,
    DATETIME_LAYOUT,
    TIME_LAYOUT,
    format_full_date,
    format_rfc3339,
    format_time_of_day,
    parse_full_date,
    parse_rfc3339,
    parse_time_of_day,
)
from chronal.format.sql import (
    SQL_DATE_LAYOUT,
    SQL_DATETIME_LAYOUT,
    SQL_TIME_LAYOUT,
    format_sql_date,
    format_sql_datetime,
    format_sql_time,
    parse_sql_date,
    parse_sql_datetime,
    parse_sql_time,
)

__all__: list[str] = [
    # RFC 3339
    "DATE_LAYOUT",
    "TIME_LAYOUT",
    "DATETIME_LAYOUT",
    "format_full_date",
    "parse_full_date",
    "format_time_of_day",
    "parse_time_of_day",
    "format_rfc3339",
    "parse_rfc3339",
    # SQL
    "SQL_DATE_LAYOUT",
    "SQL_TIME_LAYOUT",
    "SQL_DATETIME_LAYOUT",
    "format_sql_date",
    "parse_sql_date",
    "format_sql_time",
    "parse_sql_time",
    "format_sql_datetime",
    "parse_sql_datetime",
    # strftime
    "format_layout",
    "parse_layout",
]
