"""Unix epoch conversions.

This module converts between aware instants and Unix timestamps
(seconds, milliseconds, microseconds and nanoseconds since
1970-01-01T00:00:00Z).

Functions:
    instant_from_unix: Instant from Unix seconds plus nanoseconds.
    instant_from_unix_milli: Instant from Unix milliseconds.
    instant_from_unix_micro: Instant from Unix microseconds.
    unix_seconds: Unix timestamp in seconds (floored).
    unix_milli: Unix timestamp in milliseconds (floored).
    unix_micro: Unix timestamp in microseconds.
    unix_nano: Unix timestamp in nanoseconds.

All instants built here are in UTC; callers re-express them in the zone
they need. Nanosecond inputs are floored to the microsecond resolution
of the instant.

Examples:
    >>> from chronal.convert.epoch import instant_from_unix, unix_seconds

    >>> instant_from_unix(0).isoformat()
    '1970-01-01T00:00:00+00:00'

    >>> unix_seconds(instant_from_unix(946771200))
    946771200
"""

from __future__ import annotations

import datetime as _datetime

from chronal._internal.constants import (
    MICROS_PER_MILLISECOND,
    NANOS_PER_MICROSECOND,
    UNIX_EPOCH,
)
from chronal.errors import ValidationError

_ONE_SECOND = _datetime.timedelta(seconds=1)
_ONE_MILLISECOND = _datetime.timedelta(milliseconds=1)
_ONE_MICROSECOND = _datetime.timedelta(microseconds=1)


def _from_micros(micros: int, source: str) -> _datetime.datetime:
    try:
        return UNIX_EPOCH + _datetime.timedelta(microseconds=micros)
    except OverflowError as err:
        raise ValidationError(f"Unix time {source} is out of range") from err


def instant_from_unix(seconds: int, nanoseconds: int = 0) -> _datetime.datetime:
    """Create a UTC instant from Unix seconds and nanoseconds.

    ``nanoseconds`` may lie outside 0-999,999,999; the excess carries
    into the seconds.

    Raises:
        ValidationError: If the result leaves years 1-9999.

    Examples:
        >>> instant_from_unix(1, 500_000_000).isoformat()
        '1970-01-01T00:00:01.500000+00:00'
    """
    micros = seconds * 1_000_000 + nanoseconds // NANOS_PER_MICROSECOND
    return _from_micros(micros, f"{seconds}s {nanoseconds}ns")


def instant_from_unix_milli(milliseconds: int) -> _datetime.datetime:
    """Create a UTC instant from Unix milliseconds."""
    return _from_micros(milliseconds * MICROS_PER_MILLISECOND, f"{milliseconds}ms")


def instant_from_unix_micro(microseconds: int) -> _datetime.datetime:
    """Create a UTC instant from Unix microseconds."""
    return _from_micros(microseconds, f"{microseconds}us")


def unix_seconds(value: _datetime.datetime) -> int:
    """Return the Unix time of ``value`` in whole seconds.

    Instants before 1970 floor toward negative infinity.

    Examples:
        >>> import datetime
        >>> v = datetime.datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=datetime.timezone.utc)
        >>> unix_seconds(v)
        -1
    """
    return (value - UNIX_EPOCH) // _ONE_SECOND


def unix_milli(value: _datetime.datetime) -> int:
    """Return the Unix time of ``value`` in milliseconds."""
    return (value - UNIX_EPOCH) // _ONE_MILLISECOND


def unix_micro(value: _datetime.datetime) -> int:
    """Return the Unix time of ``value`` in microseconds."""
    return (value - UNIX_EPOCH) // _ONE_MICROSECOND


def unix_nano(value: _datetime.datetime) -> int:
    """Return the Unix time of ``value`` in nanoseconds."""
    return unix_micro(value) * NANOS_PER_MICROSECOND


__all__ = [
    "instant_from_unix",
    "instant_from_unix_milli",
    "instant_from_unix_micro",
    "unix_seconds",
    "unix_milli",
    "unix_micro",
    "unix_nano",
]
