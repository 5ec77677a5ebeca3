"""Comparison operations for Chronal value types.

This module is the canonical implementation of the comparison suite
shared by Date, TimeOfDay and DateTime. The methods on each class
delegate here so the three types order themselves identically.

Comparison Rules:
    - Values are ordered by the instant they wrap, so values in
      different zones compare by absolute time
    - Date instants are midnight UTC, so dates order by calendar day
    - TimeOfDay instants share one reference date, so they order by
      clock reading adjusted for the zone offset
    - Comparing values of different types raises TypeError

Supported Operations:
    - equal: same instant
    - after / after_or_equal
    - before / before_or_equal
    - between: exclusive range (start, end)
    - between_or_equal: inclusive range [start, end]
    - compare: three-way comparison (-1, 0, 1)
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Union

from chronal.arithmetic.ops import since_epoch

if TYPE_CHECKING:
    from chronal.core.date import Date
    from chronal.core.datetime import DateTime
    from chronal.core.time import TimeOfDay

# Type alias for comparable value types
ComparableType = Union["Date", "TimeOfDay", "DateTime"]


def _instant(left: ComparableType, right: object, op: str) -> _datetime.timedelta:
    """Return the position of ``right`` on the time line after a type check."""
    if type(right) is not type(left):
        raise TypeError(
            f"cannot compare {type(left).__name__} {op} {type(right).__name__}"
        )
    return since_epoch(right._t)  # type: ignore[attr-defined]


def equal(left: ComparableType, right: ComparableType) -> bool:
    """Test whether two values denote the same instant.

    Examples:
        >>> from chronal.core.date import Date
        >>> equal(Date(2024, 1, 15), Date(2024, 1, 15))
        True
    """
    return since_epoch(left._t) == _instant(left, right, "==")


def after(left: ComparableType, right: ComparableType) -> bool:
    """Test whether ``left`` is strictly after ``right``."""
    return since_epoch(left._t) > _instant(left, right, ">")


def after_or_equal(left: ComparableType, right: ComparableType) -> bool:
    """Test whether ``left`` is after or equal to ``right``."""
    return since_epoch(left._t) >= _instant(left, right, ">=")


def before(left: ComparableType, right: ComparableType) -> bool:
    """Test whether ``left`` is strictly before ``right``."""
    return since_epoch(left._t) < _instant(left, right, "<")


def before_or_equal(left: ComparableType, right: ComparableType) -> bool:
    """Test whether ``left`` is before or equal to ``right``."""
    return since_epoch(left._t) <= _instant(left, right, "<=")


def between(
    value: ComparableType,
    start: ComparableType,
    end: ComparableType,
) -> bool:
    """Test whether ``value`` lies in the exclusive range (start, end).

    Examples:
        >>> from chronal.core.date import Date
        >>> d = Date(2024, 1, 15)
        >>> between(d, d, Date(2024, 2, 1))
        False
    """
    return after(value, start) and before(value, end)


def between_or_equal(
    value: ComparableType,
    start: ComparableType,
    end: ComparableType,
) -> bool:
    """Test whether ``value`` lies in the inclusive range [start, end].

    Examples:
        >>> from chronal.core.date import Date
        >>> d = Date(2024, 1, 15)
        >>> between_or_equal(d, d, Date(2024, 2, 1))
        True
    """
    return after_or_equal(value, start) and before_or_equal(value, end)


def compare(left: ComparableType, right: ComparableType) -> int:
    """Three-way comparison.

    Returns:
        -1 if left is before right, 0 if equal, 1 if after.
    """
    other = _instant(left, right, "<=>")
    if since_epoch(left._t) < other:
        return -1
    if since_epoch(left._t) > other:
        return 1
    return 0


__all__ = [
    "equal",
    "after",
    "after_or_equal",
    "before",
    "before_or_equal",
    "between",
    "between_or_equal",
    "compare",
]
