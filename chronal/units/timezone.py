"""Zone helpers built on the standard library tzinfo model.

Chronal does not model timezones itself. Any ``datetime.tzinfo`` works:
``datetime.timezone`` for fixed offsets and ``zoneinfo.ZoneInfo`` for
IANA zones. This module holds the small amount of glue the codecs need:
writing and reading UTC offsets, and choosing which tzinfo a parsed
offset should be attached to.
"""

from __future__ import annotations

import datetime as _datetime
import re

from chronal._internal.constants import UTC
from chronal.errors import ParseError, ValidationError

_OFFSET_PATTERN = re.compile(r"([+-])(\d{2})(?::?(\d{2}))?", re.ASCII)

# Python's tzinfo contract: offsets strictly within one day
_MAX_OFFSET = _datetime.timedelta(hours=24)


def fixed_offset(hours: int, minutes: int = 0) -> _datetime.timezone:
    """Create a fixed-offset zone from hours and minutes.

    Args:
        hours: Hour component of the offset; its sign gives the direction.
        minutes: Minute component (0 to 59), always non-negative.

    Returns:
        ``datetime.timezone.utc`` for a zero offset, otherwise a
        ``datetime.timezone`` with the offset.

    Raises:
        ValidationError: If the offset is out of range.

    Examples:
        >>> fixed_offset(5, 30)
        datetime.timezone(datetime.timedelta(seconds=19800))
        >>> fixed_offset(0) is UTC
        True
    """
    if minutes < 0 or minutes > 59:
        raise ValidationError(f"minutes must be 0-59, got {minutes}")

    sign = -1 if hours < 0 else 1
    offset = _datetime.timedelta(hours=hours, minutes=sign * minutes)
    return zone_for_offset(offset)


def zone_for_offset(offset: _datetime.timedelta) -> _datetime.timezone:
    """Return the canonical fixed zone for an offset (UTC for zero)."""
    if not (-_MAX_OFFSET < offset < _MAX_OFFSET):
        raise ValidationError(f"offset {offset} is outside (-24h, +24h)")
    if not offset:
        return UTC
    return _datetime.timezone(offset)


def minute_zone(
    offset: _datetime.timedelta | None,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.timezone:
    """Return the fixed zone for ``offset`` truncated to whole minutes.

    The truncation matches :func:`format_offset`, so a value carrying the
    returned zone reads back from text with the same offset. ``tz`` is
    returned itself when it already is that fixed zone.

    Examples:
        >>> minute_zone(_datetime.timedelta(minutes=9, seconds=21))
        datetime.timezone(datetime.timedelta(seconds=540))
        >>> minute_zone(_datetime.timedelta(seconds=-30)) is UTC
        True
    """
    total = int(offset.total_seconds()) if offset is not None else 0
    whole = _datetime.timedelta(minutes=abs(total) // 60)
    if total < 0:
        whole = -whole
    if isinstance(tz, _datetime.timezone) and tz.utcoffset(None) == whole:
        return tz
    return zone_for_offset(whole)


def local_zone() -> _datetime.tzinfo:
    """Return the local zone as a fixed offset valid for the current moment."""
    tz = _datetime.datetime.now().astimezone().tzinfo
    assert tz is not None
    return tz


def utc_offset(value: _datetime.datetime) -> _datetime.timedelta:
    """Return the UTC offset of ``value``, zero for naive values."""
    return value.utcoffset() or _datetime.timedelta(0)


def zone_of(value: _datetime.datetime) -> tuple[str, int]:
    """Return the abbreviated zone name and offset in seconds of ``value``."""
    offset = utc_offset(value)
    name = value.tzname() or ""
    return name, int(offset.total_seconds())


def in_zone(
    value: _datetime.datetime,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Re-express ``value`` in ``tz``, or in the local zone when omitted.

    Naive values are taken to be local time.

    Raises:
        ValidationError: If the converted wall clock leaves years 1-9999.
    """
    try:
        return value.astimezone(tz)
    except OverflowError as err:
        raise ValidationError(f"{value.isoformat()} cannot be expressed in {tz}") from err


def format_offset(
    offset: _datetime.timedelta,
    *,
    zulu: bool = True,
    short: bool = False,
) -> str:
    """Format a UTC offset.

    Seconds are truncated toward zero, so an LMT offset such as
    -04:56:02 is written as -04:56.

    Args:
        offset: The UTC offset.
        zulu: Write "Z" for a zero offset.
        short: Write ``±HH`` and append ``:MM`` only when the minutes are
            not zero (the SQL dialect). Otherwise always ``±HH:MM``.

    Returns:
        The formatted offset.

    Examples:
        >>> format_offset(_datetime.timedelta(0))
        'Z'
        >>> format_offset(_datetime.timedelta(hours=-7))
        '-07:00'
        >>> format_offset(_datetime.timedelta(0), zulu=False, short=True)
        '+00'
        >>> format_offset(_datetime.timedelta(hours=5, minutes=30), short=True)
        '+05:30'
    """
    total = int(offset.total_seconds())
    if zulu and total == 0:
        return "Z"

    minutes = abs(total) // 60
    sign = "-" if total < 0 and minutes else "+"
    hours, minutes = divmod(minutes, 60)

    if short and not minutes:
        return f"{sign}{hours:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def parse_offset(s: str) -> _datetime.timedelta:
    """Parse a UTC offset.

    Supported formats:
        - "Z": UTC
        - "+HH:MM" or "-HH:MM"
        - "+HHMM" or "-HHMM"
        - "+HH" or "-HH"

    Raises:
        ParseError: If the string is not an offset.

    Examples:
        >>> parse_offset("Z")
        datetime.timedelta(0)
        >>> parse_offset("-05")
        datetime.timedelta(days=-1, seconds=68400)
    """
    if s == "Z":
        return _datetime.timedelta(0)

    match = _OFFSET_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"cannot parse UTC offset: {s!r}")

    sign_str, hours_str, minutes_str = match.groups()
    hours = int(hours_str)
    minutes = int(minutes_str) if minutes_str else 0
    if hours > 23 or minutes > 59:
        raise ParseError(f"UTC offset out of range: {s!r}")

    offset = _datetime.timedelta(hours=hours, minutes=minutes)
    return -offset if sign_str == "-" else offset


def resolve_zone(
    wall: _datetime.datetime,
    offset: _datetime.timedelta,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.tzinfo:
    """Choose the tzinfo a parsed wall-clock reading belongs to.

    If ``tz`` is given and has the parsed offset at that wall-clock time,
    ``tz`` itself is used so the value keeps its zone name and rules.
    Otherwise a fixed-offset zone is fabricated (UTC for a zero offset).

    Args:
        wall: The parsed naive wall-clock reading.
        offset: The parsed UTC offset.
        tz: The zone the caller expects, if any.

    Returns:
        The tzinfo to attach to ``wall``.
    """
    if tz is not None and wall.replace(tzinfo=tz).utcoffset() == offset:
        return tz
    try:
        return zone_for_offset(offset)
    except ValidationError as err:
        raise ParseError(f"UTC offset out of range: {offset}") from err


__all__ = [
    "UTC",
    "fixed_offset",
    "zone_for_offset",
    "minute_zone",
    "local_zone",
    "in_zone",
    "utc_offset",
    "zone_of",
    "format_offset",
    "parse_offset",
    "resolve_zone",
]
