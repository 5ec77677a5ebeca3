"""Arithmetic on standard library instants.

The value types keep all of their arithmetic here, as plain functions
over ``datetime.datetime``:

    - add_elapsed: add an exact amount of elapsed time
    - add_calendar: add years, months and days with overflow normalization
    - truncate_delta / round_delta: adjustment to a multiple of a step,
      measured on absolute time since 0001-01-01T00:00:00Z
    - shift_clock: move a clock reading around the 24 hour dial without
      touching the calendar date

Elapsed-time arithmetic is absolute: adding one hour across a DST
transition yields a value exactly 3600 seconds later, even though the
wall clock may move by zero or two hours.
"""

from __future__ import annotations

import datetime as _datetime

from chronal._internal.calendar import normalize_date
from chronal._internal.constants import INSTANT_EPOCH, MICROS_PER_DAY, UTC
from chronal.errors import ValidationError

_ONE_MICROSECOND = _datetime.timedelta(microseconds=1)


def add_elapsed(
    value: _datetime.datetime,
    delta: _datetime.timedelta,
) -> _datetime.datetime:
    """Return ``value`` moved by ``delta`` of elapsed time.

    Args:
        value: An aware instant.
        delta: Elapsed time to add (can be negative).

    Returns:
        A new instant in the same zone.

    Raises:
        ValidationError: If the result leaves years 1-9999.
    """
    tz = value.tzinfo
    try:
        if tz is None or isinstance(tz, _datetime.timezone):
            return value + delta
        return (value.astimezone(UTC) + delta).astimezone(tz)
    except OverflowError as err:
        raise ValidationError(f"{value.isoformat()} + {delta} is out of range") from err


def add_calendar(
    value: _datetime.datetime,
    years: int,
    months: int,
    days: int,
) -> _datetime.datetime:
    """Add calendar units to the wall-clock date of ``value``.

    The clock reading and zone are kept. Overflowing days roll into the
    following month: 2023-01-31 plus one month is 2023-03-03.

    Raises:
        ValidationError: If the result leaves years 1-9999.
    """
    target = normalize_date(value.year + years, value.month + months, value.day + days)
    return value.replace(year=target.year, month=target.month, day=target.day)


def since_epoch(value: _datetime.datetime) -> _datetime.timedelta:
    """Return the elapsed time from 0001-01-01T00:00:00Z to ``value``.

    Two values sharing a zone are measured as instants here, not as wall
    clocks, so the result honors ``fold`` and DST offsets.
    """
    return value - INSTANT_EPOCH


def _step_micros(step: _datetime.timedelta) -> int:
    return step // _ONE_MICROSECOND


def _remainder(value: _datetime.datetime, step_micros: int) -> int:
    """Microseconds of ``value`` past the last multiple of the step."""
    return (since_epoch(value) // _ONE_MICROSECOND) % step_micros


def truncate_delta(
    value: _datetime.datetime,
    step: _datetime.timedelta,
) -> _datetime.timedelta:
    """Return the adjustment that truncates ``value`` to a multiple of ``step``.

    A non-positive step yields a zero adjustment.

    Examples:
        >>> v = _datetime.datetime(2024, 1, 15, 14, 37, tzinfo=UTC)
        >>> truncate_delta(v, _datetime.timedelta(minutes=15))
        datetime.timedelta(days=-1, seconds=85980)
    """
    step_micros = _step_micros(step)
    if step_micros <= 0:
        return _datetime.timedelta(0)
    return -_datetime.timedelta(microseconds=_remainder(value, step_micros))


def round_delta(
    value: _datetime.datetime,
    step: _datetime.timedelta,
) -> _datetime.timedelta:
    """Return the adjustment that rounds ``value`` to a multiple of ``step``.

    Halfway values round up. A non-positive step yields a zero adjustment.
    """
    step_micros = _step_micros(step)
    if step_micros <= 0:
        return _datetime.timedelta(0)
    remainder = _remainder(value, step_micros)
    if remainder + remainder < step_micros:
        return -_datetime.timedelta(microseconds=remainder)
    return _datetime.timedelta(microseconds=step_micros - remainder)


def clock_micros(value: _datetime.datetime | _datetime.time) -> int:
    """Return the clock reading of ``value`` as microseconds since midnight."""
    return (
        (value.hour * 60 + value.minute) * 60 + value.second
    ) * 1_000_000 + value.microsecond


def shift_clock(
    value: _datetime.datetime,
    delta: _datetime.timedelta,
) -> _datetime.datetime:
    """Move the clock reading of ``value`` by ``delta``, wrapping at midnight.

    The calendar date and zone of ``value`` are left untouched.

    Examples:
        >>> v = _datetime.datetime(1, 1, 1, 23, 30, tzinfo=UTC)
        >>> shift_clock(v, _datetime.timedelta(hours=1)).time()
        datetime.time(0, 30)
    """
    micros = (clock_micros(value) + delta // _ONE_MICROSECOND) % MICROS_PER_DAY
    seconds, microsecond = divmod(micros, 1_000_000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return value.replace(hour=hour, minute=minute, second=second, microsecond=microsecond)


__all__ = [
    "add_elapsed",
    "add_calendar",
    "since_epoch",
    "truncate_delta",
    "round_delta",
    "clock_micros",
    "shift_clock",
]
