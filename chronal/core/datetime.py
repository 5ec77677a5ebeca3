"""DateTime class representing an instant with its zone.

This module provides the DateTime class, a full-fidelity wrapper over an
aware ``datetime.datetime``.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any

from chronal._internal.constants import INSTANT_EPOCH, NANOS_PER_MICROSECOND, UTC
from chronal._internal.validation import validate_clock, validate_date, validate_tzinfo
from chronal.arithmetic import comparisons
from chronal.arithmetic.ops import (
    add_calendar,
    add_elapsed,
    round_delta,
    since_epoch,
    truncate_delta,
)
from chronal.convert.binary import decode_instant, encode_instant
from chronal.convert.epoch import (
    instant_from_unix,
    instant_from_unix_micro,
    instant_from_unix_milli,
    unix_micro,
    unix_milli,
    unix_nano,
    unix_seconds,
)
from chronal.convert.json import decode_json_text, encode_json_text
from chronal.convert.sql import coerce_scan_value, unsupported
from chronal.format.fields import text_of
from chronal.format.layout import format_layout, parse_layout
from chronal.format.rfc3339 import DATETIME_LAYOUT, format_rfc3339, parse_rfc3339
from chronal.format.sql import format_sql_datetime, parse_sql_datetime
from chronal.units.timezone import in_zone, zone_of

if TYPE_CHECKING:
    from chronal.core.date import Date
    from chronal.core.time import TimeOfDay


class DateTime:
    """An instant in time together with the zone it is read in.

    DateTime wraps a single aware ``datetime.datetime`` and adds nothing
    to its semantics: comparisons are by absolute instant, ``add`` adds
    elapsed time, ``add_date`` adds calendar units to the wall clock.
    Naive standard library values handed to DateTime are local time.

    Attributes:
        year, month, day: The calendar date in the value's zone.
        hour, minute, second, microsecond, nanosecond: The clock reading.
        tzinfo: The zone.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
        >>> dt.year
        2024
        >>> dt.hour
        14
        >>> str(dt)
        '2024-01-15T14:30:45Z'

        >>> dt.to_date()
        Date(2024, 1, 15)
    """

    __slots__ = ("_t",)

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        tz: _datetime.tzinfo = UTC,
    ) -> None:
        """Create a DateTime from component parts.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The sub-second part (0-999999999), floored to
                whole microseconds.
            tz: The zone of the wall-clock reading.

        Raises:
            ValidationError: If any component is out of range.
            TypeError: If tz is not a tzinfo.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30)
            DateTime(2024, 1, 15, 14, 30, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        validate_date(year, month, day)
        validate_clock(hour, minute, second, nanosecond)
        validate_tzinfo(tz)
        self._t: _datetime.datetime = _datetime.datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tz,
        )

    @classmethod
    def _from_instant(cls, instant: _datetime.datetime) -> DateTime:
        """Wrap an instant, reading naive values as local time.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._t = instant if instant.tzinfo is not None else in_zone(instant)
        return instance

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def now(cls) -> DateTime:
        """Return the current instant in the local zone."""
        return cls._from_instant(_datetime.datetime.now().astimezone())

    @classmethod
    def zero(cls) -> DateTime:
        """Return the zero DateTime, 0001-01-01T00:00:00Z."""
        return cls._from_instant(INSTANT_EPOCH)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> DateTime:
        """Create a DateTime from a standard library datetime.

        Naive values are local time.

        Raises:
            TypeError: If value is not a datetime.
        """
        if not isinstance(value, _datetime.datetime):
            raise TypeError(f"expected datetime, got {type(value).__name__}")
        return cls._from_instant(value)

    @classmethod
    def from_string(cls, s: str, tz: _datetime.tzinfo | None = None) -> DateTime:
        """Parse an RFC 3339 date-time.

        Args:
            s: The text to parse, e.g. "2024-01-15T14:30:45.5+01:00".
            tz: Zone to attach when its offset at the parsed wall-clock time
                equals the parsed offset. Otherwise the result carries a
                fixed-offset zone (UTC for a zero offset).

        Raises:
            ParseError: If the text is not RFC 3339.

        Examples:
            >>> DateTime.from_string("2024-01-15T14:30:45Z")
            DateTime(2024, 1, 15, 14, 30, 45, nanosecond=0, tz=datetime.timezone.utc)
        """
        return cls._from_instant(parse_rfc3339(s, tz))

    @classmethod
    def from_layout(
        cls,
        layout: str,
        s: str,
        tz: _datetime.tzinfo | None = None,
    ) -> DateTime:
        """Parse a date-time using strptime directives.

        A layout without ``%z`` places the wall-clock reading in ``tz``
        (UTC when omitted).

        Examples:
            >>> DateTime.from_layout("%d/%m/%Y %H:%M", "15/01/2024 14:30")
            DateTime(2024, 1, 15, 14, 30, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return cls._from_instant(parse_layout(layout, s, tz))

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> DateTime:
        """Create a local DateTime from a Unix timestamp."""
        return cls._from_instant(in_zone(instant_from_unix(seconds, nanoseconds)))

    @classmethod
    def from_unix_milli(cls, milliseconds: int) -> DateTime:
        """Create a local DateTime from Unix milliseconds."""
        return cls._from_instant(in_zone(instant_from_unix_milli(milliseconds)))

    @classmethod
    def from_unix_micro(cls, microseconds: int) -> DateTime:
        """Create a local DateTime from Unix microseconds."""
        return cls._from_instant(in_zone(instant_from_unix_micro(microseconds)))

    def to_datetime(self) -> _datetime.datetime:
        """Return the wrapped aware datetime."""
        return self._t

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._t.year

    @property
    def month(self) -> int:
        return self._t.month

    @property
    def day(self) -> int:
        return self._t.day

    @property
    def hour(self) -> int:
        return self._t.hour

    @property
    def minute(self) -> int:
        return self._t.minute

    @property
    def second(self) -> int:
        return self._t.second

    @property
    def microsecond(self) -> int:
        return self._t.microsecond

    @property
    def nanosecond(self) -> int:
        """Return the sub-second part in nanoseconds."""
        return self._t.microsecond * NANOS_PER_MICROSECOND

    @property
    def tzinfo(self) -> _datetime.tzinfo:
        """Return the zone of the wall-clock reading."""
        return self._t.tzinfo  # type: ignore[return-value]

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return self._t.timetuple().tm_yday

    def ymd(self) -> tuple[int, int, int]:
        """Return the (year, month, day) triple."""
        return self._t.year, self._t.month, self._t.day

    def clock(self) -> tuple[int, int, int]:
        """Return the (hour, minute, second) triple."""
        return self._t.hour, self._t.minute, self._t.second

    def weekday(self) -> int:
        """Return the day of the week, where Monday is 0 and Sunday is 6."""
        return self._t.weekday()

    def iso_week(self) -> tuple[int, int]:
        """Return the ISO 8601 (year, week number)."""
        iso = self._t.isocalendar()
        return iso.year, iso.week

    def zone(self) -> tuple[str, int]:
        """Return the zone abbreviation and UTC offset in seconds.

        Examples:
            >>> from chronal.units.timezone import fixed_offset
            >>> DateTime(2024, 1, 15, tz=fixed_offset(5, 30)).zone()
            ('UTC+05:30', 19800)
        """
        return zone_of(self._t)

    def is_dst(self) -> bool:
        """Return True if daylight saving time is in effect."""
        return bool(self._t.dst())

    def is_zero(self) -> bool:
        """Return True if this is the instant 0001-01-01T00:00:00Z."""
        return self._t == INSTANT_EPOCH

    def unix(self) -> int:
        """Return the Unix time in whole seconds (floored)."""
        return unix_seconds(self._t)

    def unix_milli(self) -> int:
        """Return the Unix time in milliseconds."""
        return unix_milli(self._t)

    def unix_micro(self) -> int:
        """Return the Unix time in microseconds."""
        return unix_micro(self._t)

    def unix_nano(self) -> int:
        """Return the Unix time in nanoseconds."""
        return unix_nano(self._t)

    # -------------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------------

    def to_date(self) -> Date:
        """Return the calendar date in this value's zone.

        Examples:
            >>> DateTime(2024, 1, 15, 23, 59).to_date()
            Date(2024, 1, 15)
        """
        from chronal.core.date import Date

        return Date.from_datetime(self._t)

    def to_time(self) -> TimeOfDay:
        """Return the clock reading and zone of this value.

        Examples:
            >>> DateTime(2024, 1, 15, 3, 4, 5).to_time()
            TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        from chronal.core.time import TimeOfDay

        return TimeOfDay.from_datetime(self._t)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, delta: _datetime.timedelta) -> DateTime:
        """Add elapsed time.

        Across a daylight saving transition the wall clock may move by
        more or less than ``delta``; the elapsed time is exact.

        Raises:
            ValidationError: If the result leaves years 1-9999.

        Examples:
            >>> import datetime
            >>> DateTime(2024, 1, 15, 23).add(datetime.timedelta(hours=2))
            DateTime(2024, 1, 16, 1, 0, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return self._from_instant(add_elapsed(self._t, delta))

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> DateTime:
        """Add calendar units to the wall-clock date.

        The clock reading and zone are kept. Days past the end of a month
        roll into the next month.

        Raises:
            ValidationError: If the result leaves years 1-9999.

        Examples:
            >>> DateTime(2023, 1, 31, 12).add_date(months=1)
            DateTime(2023, 3, 3, 12, 0, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return self._from_instant(add_calendar(self._t, years, months, days))

    def sub(self, other: DateTime) -> _datetime.timedelta:
        """Return the elapsed time from ``other`` to this instant.

        Raises:
            TypeError: If other is not a DateTime.
        """
        if not isinstance(other, DateTime):
            raise TypeError(f"expected DateTime, got {type(other).__name__}")
        return since_epoch(self._t) - since_epoch(other._t)

    def round(self, step: _datetime.timedelta) -> DateTime:
        """Round to the nearest multiple of ``step`` since 0001-01-01T00:00:00Z.

        Halfway values round up. A non-positive step returns the value
        unchanged.

        Examples:
            >>> import datetime
            >>> DateTime(2024, 1, 15, 14, 37, 30).round(datetime.timedelta(hours=1))
            DateTime(2024, 1, 15, 15, 0, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        return self._from_instant(add_elapsed(self._t, round_delta(self._t, step)))

    def truncate(self, step: _datetime.timedelta) -> DateTime:
        """Round down to a multiple of ``step`` since 0001-01-01T00:00:00Z.

        A non-positive step returns the value unchanged.
        """
        return self._from_instant(add_elapsed(self._t, truncate_delta(self._t, step)))

    def in_(self, tz: _datetime.tzinfo) -> DateTime:
        """Re-express the same instant in another zone.

        Raises:
            ValidationError: If the wall clock in ``tz`` leaves years 1-9999.
        """
        validate_tzinfo(tz)
        return self._from_instant(in_zone(self._t, tz))

    def local(self) -> DateTime:
        """Re-express the same instant in the local zone."""
        return self._from_instant(in_zone(self._t))

    def utc(self) -> DateTime:
        """Re-express the same instant in UTC."""
        return self.in_(UTC)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal(self, other: DateTime) -> bool:
        """Return True if both denote the same instant, whatever their zones."""
        return comparisons.equal(self, other)

    def after(self, other: DateTime) -> bool:
        return comparisons.after(self, other)

    def after_or_equal(self, other: DateTime) -> bool:
        return comparisons.after_or_equal(self, other)

    def before(self, other: DateTime) -> bool:
        return comparisons.before(self, other)

    def before_or_equal(self, other: DateTime) -> bool:
        return comparisons.before_or_equal(self, other)

    def between(self, start: DateTime, end: DateTime) -> bool:
        """Return True if this lies strictly between start and end."""
        return comparisons.between(self, start, end)

    def between_or_equal(self, start: DateTime, end: DateTime) -> bool:
        """Return True if this lies in [start, end]."""
        return comparisons.between_or_equal(self, start, end)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def format(self, layout: str) -> str:
        """Format using strftime directives."""
        return format_layout(self._t, layout)

    def to_text(self) -> str:
        """Return RFC 3339 text with sub-second digits, trailing zeros trimmed.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45, 500_000_000).to_text()
            '2024-01-15T14:30:45.5Z'
        """
        return format_rfc3339(self._t)

    @classmethod
    def from_text(cls, data: str | bytes) -> DateTime:
        """Create a DateTime from RFC 3339 text, given as str or ASCII bytes."""
        return cls.from_string(text_of(data, DATETIME_LAYOUT))

    def to_json(self) -> str:
        """Return the instant as a JSON string."""
        return encode_json_text(self.to_text())

    @classmethod
    def from_json(cls, data: str | bytes) -> DateTime:
        """Create a DateTime from a JSON string holding RFC 3339 text.

        Raises:
            ParseError: If the document is not a quoted RFC 3339 string.
        """
        return cls.from_string(decode_json_text(data))

    def to_bytes(self) -> bytes:
        """Return the binary instant encoding (zone names are not kept)."""
        return encode_instant(self._t)

    @classmethod
    def from_bytes(cls, data: bytes) -> DateTime:
        """Create a DateTime from a binary instant encoding.

        Raises:
            DecodeError: If the data is not a valid instant encoding.
        """
        return cls._from_instant(decode_instant(data))

    def sql_value(self) -> str:
        """Return the SQL TIMESTAMP WITH TIME ZONE parameter (whole seconds).

        Examples:
            >>> DateTime(2000, 1, 2, 3, 4, 5).sql_value()
            '2000-01-02 03:04:05+00'
        """
        return format_sql_datetime(self._t)

    @classmethod
    def scan(cls, value: Any) -> DateTime:
        """Create a DateTime from a value returned by a SQL driver.

        Accepted values:
            - None: the zero DateTime
            - int or float: Unix seconds, result in UTC (floats are
              truncated)
            - str, bytes, bytearray, memoryview:
              YYYY-MM-DD HH:MM:SS[.f]±HH[:MM]
            - datetime.datetime: wrapped as is (naive values are local)

        Raises:
            ScanError: If the value has any other type.
            ParseError: If textual data does not match the SQL layout.

        Examples:
            >>> DateTime.scan(946782245)
            DateTime(2000, 1, 2, 3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
        """
        value = coerce_scan_value(value, cls.__name__)
        if value is None:
            return cls.zero()
        if isinstance(value, int):
            return cls._from_instant(instant_from_unix(value))
        if isinstance(value, str):
            return cls._from_instant(parse_sql_datetime(value))
        if isinstance(value, _datetime.datetime):
            return cls.from_datetime(value)
        raise unsupported(value, cls.__name__)

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> DateTime:
        """Add elapsed time given as a timedelta.

        Examples:
            >>> import datetime
            >>> DateTime(2024, 1, 15, 12) + datetime.timedelta(days=1, hours=2)
            DateTime(2024, 1, 16, 14, 0, 0, nanosecond=0, tz=datetime.timezone.utc)
        """
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> DateTime | _datetime.timedelta:
        """Subtract a timedelta or another DateTime.

        When subtracting a timedelta, returns a new DateTime.
        When subtracting a DateTime, returns the elapsed timedelta.

        Examples:
            >>> dt1 = DateTime(2024, 1, 15, 14)
            >>> dt2 = DateTime(2024, 1, 15, 12)
            >>> (dt1 - dt2).total_seconds()
            7200.0
        """
        if isinstance(other, _datetime.timedelta):
            return self.add(-other)
        if isinstance(other, DateTime):
            return self.sub(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparisons.equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparisons.before(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparisons.before_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparisons.after(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return comparisons.after_or_equal(self, other)

    def __hash__(self) -> int:
        return hash(since_epoch(self._t))

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        return (
            f"DateTime({self.year}, {self.month}, {self.day}, {self.hour}, "
            f"{self.minute}, {self.second}, nanosecond={self.nanosecond}, "
            f"tz={self._t.tzinfo!r})"
        )

    def __str__(self) -> str:
        """Return RFC 3339 text at second precision."""
        return format_rfc3339(self._t, fraction=False)


__all__ = ["DateTime"]
