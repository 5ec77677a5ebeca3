"""Calendar utilities for Chronal.

The calendar itself belongs to the standard library. This module only
adds the overflow normalization rule used by ``add_date``: out of range
months carry into the year, and the day is then counted forward (or
backward) from the first of the resulting month. Under that rule
2024-01-31 plus one month is 2024-03-02 and day 0 of a month is the last
day of the previous one.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar as _calendar
import datetime as _datetime

from chronal.errors import ValidationError


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    return _calendar.monthrange(year, month)[1]


def normalize_date(year: int, month: int, day: int) -> _datetime.date:
    """Build a date from possibly out of range components.

    Args:
        year: The year.
        month: Any month number; 0 is December of the previous year,
            13 is January of the next.
        day: Any day number; 0 is the last day of the previous month.

    Returns:
        The normalized date.

    Raises:
        ValidationError: If the normalized date falls outside years 1-9999.

    Examples:
        >>> normalize_date(2024, 2, 31)
        datetime.date(2024, 3, 2)
        >>> normalize_date(2024, 3, 0)
        datetime.date(2024, 2, 29)
        >>> normalize_date(2024, 13, 1)
        datetime.date(2025, 1, 1)
    """
    year_carry, month_index = divmod(month - 1, 12)
    try:
        first = _datetime.date(year + year_carry, month_index + 1, 1)
        return first + _datetime.timedelta(days=day - 1)
    except (ValueError, OverflowError) as err:
        raise ValidationError(
            f"date {year}-{month:02d}-{day:02d} is out of range"
        ) from err


__all__ = [
    "days_in_month",
    "normalize_date",
]
