"""Validation utilities for Chronal.

This module provides the range checks run by every constructor before
a value reaches the standard library instant, so that callers see a
ValidationError naming the offending component instead of a bare
ValueError from ``datetime``.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from chronal._internal.calendar import days_in_month
from chronal._internal.constants import MAX_YEAR, MIN_YEAR
from chronal.errors import ValidationError


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a representable date."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_clock(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate the components of a clock reading.

    Raises:
        ValidationError: If any component is out of range.
    """
    if not (0 <= hour <= 23):
        raise ValidationError(f"hour must be between 0 and 23, got {hour}")
    if not (0 <= minute <= 59):
        raise ValidationError(f"minute must be between 0 and 59, got {minute}")
    if not (0 <= second <= 59):
        raise ValidationError(f"second must be between 0 and 59, got {second}")
    if not (0 <= nanosecond <= 999_999_999):
        raise ValidationError(
            f"nanosecond must be between 0 and 999999999, got {nanosecond}"
        )


def validate_tzinfo(tz: object) -> None:
    """Validate that ``tz`` is a tzinfo instance.

    Raises:
        TypeError: If ``tz`` is not a ``datetime.tzinfo``.
    """
    if not isinstance(tz, _datetime.tzinfo):
        raise TypeError(f"expected tzinfo, got {type(tz).__name__}")


__all__ = [
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_clock",
    "validate_tzinfo",
]
