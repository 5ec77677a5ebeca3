"""TimeOfDay class representing a clock reading in a zone.

This module provides the TimeOfDay class. Its calendar date is pinned to
the reference date 0001-01-01 so that only the clock reading and the zone
carry information.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from chronal._internal.constants import (
    INSTANT_EPOCH,
    NANOS_PER_MICROSECOND,
    REFERENCE_DAY,
    REFERENCE_MONTH,
    REFERENCE_YEAR,
    UTC,
)
from chronal._internal.validation import validate_clock, validate_tzinfo
from chronal.arithmetic import comparisons
from chronal.arithmetic.ops import round_delta, shift_clock, since_epoch, truncate_delta
from chronal.convert.binary import decode_instant, encode_instant
from chronal.convert.epoch import (
    instant_from_unix,
    instant_from_unix_micro,
    instant_from_unix_milli,
)
from chronal.convert.json import decode_json_text, encode_json_text
from chronal.convert.sql import coerce_scan_value, unsupported
from chronal.format.fields import text_of
from chronal.format.layout import format_layout, parse_layout
from chronal.format.rfc3339 import TIME_LAYOUT, format_time_of_day, parse_time_of_day
from chronal.format.sql import format_sql_time, parse_sql_time
from chronal.units.timezone import in_zone, local_zone, minute_zone, utc_offset, zone_of


class TimeOfDay:
    """A clock reading in a zone, with microsecond precision.

    TimeOfDay wraps a single ``datetime.datetime`` on the reference date
    0001-01-01. Every operation that produces a TimeOfDay re-projects its
    result onto that date, so arithmetic wraps around midnight instead of
    moving to another day.

    Two TimeOfDay values are equal when they denote the same absolute
    instant on the reference date: 12:00Z equals 13:00+01:00.

    The zone is always a fixed offset in whole minutes, so the text, JSON
    and SQL forms read back to an equal value. A zone with rules, such as
    ``zoneinfo.ZoneInfo``, is pinned to the offset in effect at the source
    instant: ``DateTime.to_time()`` in Europe/Paris in July keeps +02:00.
    Given directly, such a zone is evaluated on 0001-01-01, where IANA
    zones report local mean time. Offset seconds are truncated.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        microsecond: The microsecond component (0-999999).
        nanosecond: The sub-second part in nanoseconds.
        tzinfo: The zone of the clock reading.

    Examples:
        >>> t = TimeOfDay(14, 30, 45)
        >>> t.hour
        14
        >>> str(t)
        '14:30:45Z'

        >>> t = TimeOfDay(12, 0, 0, nanosecond=123_456_789)
        >>> t.microsecond
        123456
        >>> t.nanosecond
        123456000
    """

    __slots__ = ("_t",)

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        tz: _datetime.tzinfo = UTC,
    ) -> None:
        """Create a TimeOfDay from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The sub-second part (0-999999999), floored to
                whole microseconds.
            tz: The zone of the clock reading. Zones that are not a
                fixed ``datetime.timezone`` in whole minutes are pinned
                to their offset on the reference date.

        Raises:
            ValidationError: If any component is out of range.
            TypeError: If tz is not a tzinfo.

        Examples:
            >>> TimeOfDay(14, 30, 45)
            TimeOfDay(14, 30, 45, nanosecond=0, tz=datetime.timezone.utc)

            >>> TimeOfDay(12, 0, 0, nanosecond=500_000_000).microsecond
            500000
        """
        validate_clock(hour, minute, second, nanosecond)
        validate_tzinfo(tz)
        wall = _datetime.datetime(
            REFERENCE_YEAR,
            REFERENCE_MONTH,
            REFERENCE_DAY,
            hour,
            minute,
            second,
            nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tz,
        )
        self._t: _datetime.datetime = wall.replace(tzinfo=minute_zone(wall.utcoffset(), tz))

    @classmethod
    def _from_instant(cls, instant: _datetime.datetime | _datetime.time) -> TimeOfDay:
        """Project an instant onto the reference date.

        The clock reading is kept and the zone becomes the fixed offset in
        effect at ``instant``; a missing zone means UTC. A ``datetime.time``
        whose zone needs a date is evaluated on the reference date.
        This is an internal factory method that bypasses validation.
        """
        wall = _datetime.datetime(
            REFERENCE_YEAR,
            REFERENCE_MONTH,
            REFERENCE_DAY,
            instant.hour,
            instant.minute,
            instant.second,
            instant.microsecond,
            tzinfo=instant.tzinfo,
        )
        offset = instant.utcoffset()
        if offset is None:
            offset = wall.utcoffset()
        instance = object.__new__(cls)
        instance._t = wall.replace(tzinfo=minute_zone(offset, instant.tzinfo))
        return instance

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def now(cls) -> TimeOfDay:
        """Return the current local clock reading in the local zone."""
        return cls._from_instant(_datetime.datetime.now().astimezone())

    @classmethod
    def zero(cls) -> TimeOfDay:
        """Return the zero TimeOfDay, midnight UTC."""
        return cls._from_instant(INSTANT_EPOCH)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime | _datetime.time) -> TimeOfDay:
        """Create a TimeOfDay from the clock reading of a standard library value.

        Args:
            value: A ``datetime.datetime`` or ``datetime.time``. A naive
                datetime is local time, like everywhere else in Chronal; a
                naive time has no date to resolve a local offset on and is
                taken to be UTC.

        Raises:
            TypeError: If value is not a datetime or time.

        Examples:
            >>> import datetime
            >>> TimeOfDay.from_datetime(datetime.time(3, 4, 5))
            TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        if isinstance(value, _datetime.datetime):
            if value.tzinfo is None:
                value = in_zone(value)
            return cls._from_instant(value)
        if isinstance(value, _datetime.time):
            return cls._from_instant(value)
        raise TypeError(f"expected datetime or time, got {type(value).__name__}")

    @classmethod
    def from_string(cls, s: str, tz: _datetime.tzinfo | None = None) -> TimeOfDay:
        """Parse a clock reading in HH:MM:SS±HH:MM format.

        A decimal fraction after the seconds is accepted. "Z" stands for
        a zero offset.

        Args:
            s: The text to parse.
            tz: Zone to attach when its offset at the reference date equals
                the parsed offset. Otherwise the result carries a fixed-offset
                zone (UTC for a zero offset).

        Raises:
            ParseError: If the text does not match the layout.

        Examples:
            >>> TimeOfDay.from_string("03:04:05Z")
            TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)

            >>> TimeOfDay.from_string("03:04:05+05:30").utc()
            TimeOfDay(21, 34, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        return cls._from_instant(parse_time_of_day(s, tz))

    @classmethod
    def from_layout(
        cls,
        layout: str,
        s: str,
        tz: _datetime.tzinfo | None = None,
    ) -> TimeOfDay:
        """Parse a clock reading using strptime directives.

        A layout without ``%z`` places the clock reading in ``tz`` (UTC
        when omitted). Date fields in the layout are parsed and discarded.

        Examples:
            >>> TimeOfDay.from_layout("%I:%M %p", "03:15 PM")
            TimeOfDay(15, 15, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return cls._from_instant(parse_layout(layout, s, tz))

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> TimeOfDay:
        """Create a TimeOfDay from the UTC clock reading of a Unix timestamp.

        Examples:
            >>> TimeOfDay.from_unix(946695845)
            TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        return cls._from_instant(instant_from_unix(seconds, nanoseconds))

    @classmethod
    def from_unix_milli(cls, milliseconds: int) -> TimeOfDay:
        """Create a TimeOfDay from the UTC clock reading of Unix milliseconds."""
        return cls._from_instant(instant_from_unix_milli(milliseconds))

    @classmethod
    def from_unix_micro(cls, microseconds: int) -> TimeOfDay:
        """Create a TimeOfDay from the UTC clock reading of Unix microseconds."""
        return cls._from_instant(instant_from_unix_micro(microseconds))

    def to_datetime(self) -> _datetime.datetime:
        """Return the wrapped instant on the reference date."""
        return self._t

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._t.hour

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return self._t.minute

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return self._t.second

    @property
    def microsecond(self) -> int:
        """Return the microsecond component (0-999999)."""
        return self._t.microsecond

    @property
    def nanosecond(self) -> int:
        """Return the sub-second part in nanoseconds."""
        return self._t.microsecond * NANOS_PER_MICROSECOND

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        """Return the zone of the clock reading."""
        return self._t.tzinfo  # type: ignore[return-value]

    def clock(self) -> tuple[int, int, int]:
        """Return the (hour, minute, second) triple."""
        return self._t.hour, self._t.minute, self._t.second

    def zone(self) -> tuple[str, int]:
        """Return the zone abbreviation and UTC offset in seconds.

        Examples:
            >>> TimeOfDay(3, 4, 5).zone()
            ('UTC', 0)
        """
        return zone_of(self._t)

    def is_dst(self) -> bool:
        """Return True if daylight saving time is in effect.

        Always False, since the zone is a fixed offset.
        """
        return bool(self._t.dst())

    def is_zero(self) -> bool:
        """Return True if this denotes the same instant as midnight UTC."""
        return self._t == INSTANT_EPOCH

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, delta: _datetime.timedelta) -> TimeOfDay:
        """Move the clock reading by ``delta``, wrapping around midnight.

        Examples:
            >>> import datetime
            >>> TimeOfDay(23, 30).add(datetime.timedelta(hours=1))
            TimeOfDay(0, 30, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return self._from_instant(shift_clock(self._t, delta))

    def sub(self, other: TimeOfDay) -> _datetime.timedelta:
        """Return the elapsed time from ``other`` to this clock reading.

        Raises:
            TypeError: If other is not a TimeOfDay.

        Examples:
            >>> TimeOfDay(12).sub(TimeOfDay(10, 30))
            datetime.timedelta(seconds=5400)
        """
        if not isinstance(other, TimeOfDay):
            raise TypeError(f"expected TimeOfDay, got {type(other).__name__}")
        return since_epoch(self._t) - since_epoch(other._t)

    def round(self, step: _datetime.timedelta) -> TimeOfDay:
        """Round to the nearest multiple of ``step``, halfway values rounding up.

        Multiples are counted from 0001-01-01T00:00:00Z, so for zones with
        offsets that are not a multiple of ``step`` the result is not a
        multiple on the local clock. A non-positive step returns the value
        unchanged.

        Examples:
            >>> import datetime
            >>> TimeOfDay(10, 7, 30).round(datetime.timedelta(minutes=15))
            TimeOfDay(10, 15, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return self._from_instant(shift_clock(self._t, round_delta(self._t, step)))

    def truncate(self, step: _datetime.timedelta) -> TimeOfDay:
        """Round down to a multiple of ``step``.

        A non-positive step returns the value unchanged.
        """
        return self._from_instant(shift_clock(self._t, truncate_delta(self._t, step)))

    def in_(self, tz: _datetime.tzinfo) -> TimeOfDay:
        """Re-express this clock reading in another zone.

        A zone with rules is pinned to its offset on the reference date.

        Examples:
            >>> from chronal.units.timezone import fixed_offset
            >>> TimeOfDay(23, 0).in_(fixed_offset(2))
            TimeOfDay(1, 0, 0, nanosecond=0, tz=datetime.timezone(datetime.timedelta(seconds=7200)))
        """
        validate_tzinfo(tz)
        zone = minute_zone(self._t.replace(tzinfo=tz).utcoffset(), tz)
        moved = self._t.replace(tzinfo=zone)
        return self._from_instant(shift_clock(moved, utc_offset(moved) - utc_offset(self._t)))

    def local(self) -> TimeOfDay:
        """Re-express this clock reading in the local zone."""
        return self.in_(local_zone())

    def utc(self) -> TimeOfDay:
        """Re-express this clock reading in UTC."""
        return self.in_(UTC)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal(self, other: TimeOfDay) -> bool:
        """Return True if both denote the same instant on the reference date."""
        return comparisons.equal(self, other)

    def after(self, other: TimeOfDay) -> bool:
        """Return True if this is strictly after ``other``."""
        return comparisons.after(self, other)

    def after_or_equal(self, other: TimeOfDay) -> bool:
        return comparisons.after_or_equal(self, other)

    def before(self, other: TimeOfDay) -> bool:
        """Return True if this is strictly before ``other``."""
        return comparisons.before(self, other)

    def before_or_equal(self, other: TimeOfDay) -> bool:
        return comparisons.before_or_equal(self, other)

    def between(self, start: TimeOfDay, end: TimeOfDay) -> bool:
        """Return True if this lies strictly between start and end.

        No wrapping around midnight takes place: 23:00 is not between
        22:00 and 01:00.
        """
        return comparisons.between(self, start, end)

    def between_or_equal(self, start: TimeOfDay, end: TimeOfDay) -> bool:
        """Return True if this lies in [start, end]."""
        return comparisons.between_or_equal(self, start, end)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def format(self, layout: str) -> str:
        """Format this clock reading using strftime directives.

        Examples:
            >>> TimeOfDay(15, 4, 5).format("%I:%M %p")
            '03:04 PM'
        """
        return format_layout(self._t, layout)

    def to_text(self) -> str:
        """Return the canonical HH:MM:SS±HH:MM text (sub-seconds dropped)."""
        return format_time_of_day(self._t)

    @classmethod
    def from_text(cls, data: str | bytes) -> TimeOfDay:
        """Create a TimeOfDay from its canonical text, given as str or ASCII bytes."""
        return cls.from_string(text_of(data, TIME_LAYOUT))

    def to_json(self) -> str:
        """Return the clock reading as a JSON string.

        Examples:
            >>> TimeOfDay(3, 4, 5).to_json()
            '"03:04:05Z"'
        """
        return encode_json_text(self.to_text())

    @classmethod
    def from_json(cls, data: str | bytes) -> TimeOfDay:
        """Create a TimeOfDay from a JSON string in the canonical layout.

        Raises:
            ParseError: If the document is not a quoted clock reading.
        """
        return cls.from_string(decode_json_text(data))

    def to_bytes(self) -> bytes:
        """Return the binary instant encoding of this clock reading.

        The encoding carries the reference date as well, and only the
        offset of the zone, not its name.
        """
        return encode_instant(self._t)

    @classmethod
    def from_bytes(cls, data: bytes) -> TimeOfDay:
        """Create a TimeOfDay from a binary instant encoding.

        Any calendar date in the encoding is discarded.

        Raises:
            DecodeError: If the data is not a valid instant encoding.
        """
        return cls._from_instant(decode_instant(data))

    def sql_value(self) -> str:
        """Return the SQL TIME WITH TIME ZONE parameter.

        Examples:
            >>> TimeOfDay(3, 4, 5).sql_value()
            '03:04:05+00'
        """
        return format_sql_time(self._t)

    @classmethod
    def scan(cls, value: Any) -> TimeOfDay:
        """Create a TimeOfDay from a value returned by a SQL driver.

        Accepted values:
            - None: the zero TimeOfDay
            - int or float: Unix seconds, clock read in UTC (floats are
              truncated)
            - str, bytes, bytearray, memoryview: HH:MM:SS[.ffffff]±HH[:MM]
            - datetime.datetime or datetime.time: its clock reading

        Raises:
            ScanError: If the value has any other type.
            ParseError: If textual data does not match the SQL layout.

        Examples:
            >>> TimeOfDay.scan("03:04:05+00")
            TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        value = coerce_scan_value(value, cls.__name__)
        if value is None:
            return cls.zero()
        if isinstance(value, int):
            return cls.from_unix(value)
        if isinstance(value, str):
            return cls._from_instant(parse_sql_time(value))
        if isinstance(value, (_datetime.datetime, _datetime.time)):
            return cls.from_datetime(value)
        raise unsupported(value, cls.__name__)

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> TimeOfDay:
        """Add a timedelta, wrapping around midnight."""
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> TimeOfDay | _datetime.timedelta:
        """Subtract a timedelta or another TimeOfDay.

        When subtracting a timedelta, returns a new TimeOfDay.
        When subtracting a TimeOfDay, returns the elapsed timedelta.
        """
        if isinstance(other, _datetime.timedelta):
            return self.add(-other)
        if isinstance(other, TimeOfDay):
            return self.sub(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return comparisons.equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return comparisons.before(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return comparisons.before_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return comparisons.after(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return comparisons.after_or_equal(self, other)

    def __hash__(self) -> int:
        return hash(since_epoch(self._t))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String showing all component values and the zone.
        """
        return (
            f"TimeOfDay({self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nanosecond}, tz={self._t.tzinfo!r})"
        )

    def __str__(self) -> str:
        return self.to_text()


__all__ = ["TimeOfDay"]
