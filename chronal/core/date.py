"""Date class representing a calendar date.

This module provides the Date class, a calendar date with the clock
pinned to midnight and the zone pinned to UTC.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Any

from chronal._internal.calendar import normalize_date
from chronal._internal.constants import INSTANT_EPOCH, UTC
from chronal._internal.validation import validate_date
from chronal.arithmetic import comparisons
from chronal.arithmetic.ops import since_epoch
from chronal.convert.binary import pack_date, unpack_date
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
from chronal.format.rfc3339 import DATE_LAYOUT, format_full_date, parse_full_date
from chronal.format.sql import format_sql_date, parse_sql_date


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date wraps a single ``datetime.datetime`` whose clock reading is
    always 00:00:00 and whose zone is always UTC. Whatever instant a Date
    is built from, only its wall-clock year, month and day survive.

    Dates range from 0001-01-01 to 9999-12-31. The earliest date is also
    the zero value.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        2024
        >>> d.month
        1
        >>> d.day
        15

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> str(Date(2000, 1, 2))
        '2000-01-02'
    """

    __slots__ = ("_t",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2024, 2, 30)  # Invalid: February doesn't have 30 days
            Traceback (most recent call last):
            ...
            chronal.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
        """
        validate_date(year, month, day)
        self._t: _datetime.datetime = _datetime.datetime(year, month, day, tzinfo=UTC)

    @classmethod
    def _from_instant(cls, instant: _datetime.date) -> Date:
        """Project an instant onto its wall-clock date.

        This is an internal factory method that bypasses validation.
        """
        instance = object.__new__(cls)
        instance._t = _datetime.datetime(
            instant.year, instant.month, instant.day, tzinfo=UTC
        )
        return instance

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def now(cls) -> Date:
        """Return today's date in the local timezone.

        Examples:
            >>> d = Date.now()  # Returns current date
            >>> d.year >= 2024
            True
        """
        return cls._from_instant(_datetime.date.today())

    @classmethod
    def zero(cls) -> Date:
        """Return the zero Date, 0001-01-01."""
        return cls._from_instant(INSTANT_EPOCH)

    @classmethod
    def from_datetime(cls, value: _datetime.date) -> Date:
        """Create a Date from the wall-clock date of a standard library value.

        Args:
            value: A ``datetime.date`` or ``datetime.datetime``. For an aware
                datetime the date in its own zone is kept, no conversion to
                UTC takes place.

        Raises:
            TypeError: If value is not a date or datetime.

        Examples:
            >>> import datetime
            >>> tz = datetime.timezone(datetime.timedelta(hours=-5))
            >>> Date.from_datetime(datetime.datetime(2024, 1, 15, 23, 0, tzinfo=tz))
            Date(2024, 1, 15)
        """
        if not isinstance(value, _datetime.date):
            raise TypeError(f"expected date or datetime, got {type(value).__name__}")
        return cls._from_instant(value)

    @classmethod
    def from_string(cls, s: str) -> Date:
        """Parse a date in YYYY-MM-DD format.

        Raises:
            ParseError: If the string is not exactly YYYY-MM-DD or names an
                impossible date.

        Examples:
            >>> Date.from_string("2024-01-15")
            Date(2024, 1, 15)
        """
        return cls._from_instant(parse_full_date(s))

    @classmethod
    def from_layout(cls, layout: str, s: str) -> Date:
        """Parse a date using strptime directives.

        Any clock or offset fields in the layout are parsed and discarded.

        Examples:
            >>> Date.from_layout("%d/%m/%Y", "15/01/2024")
            Date(2024, 1, 15)
        """
        return cls._from_instant(parse_layout(layout, s))

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> Date:
        """Create a Date from a Unix timestamp, taking the date in UTC.

        Examples:
            >>> Date.from_unix(946771200)
            Date(2000, 1, 2)
        """
        return cls._from_instant(instant_from_unix(seconds, nanoseconds))

    @classmethod
    def from_unix_milli(cls, milliseconds: int) -> Date:
        """Create a Date from Unix milliseconds, taking the date in UTC."""
        return cls._from_instant(instant_from_unix_milli(milliseconds))

    @classmethod
    def from_unix_micro(cls, microseconds: int) -> Date:
        """Create a Date from Unix microseconds, taking the date in UTC."""
        return cls._from_instant(instant_from_unix_micro(microseconds))

    def to_datetime(self) -> _datetime.datetime:
        """Return the wrapped instant, midnight UTC of this date."""
        return self._t

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._t.year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._t.month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._t.day

    def ymd(self) -> tuple[int, int, int]:
        """Return the (year, month, day) triple.

        Examples:
            >>> Date(2024, 1, 15).ymd()
            (2024, 1, 15)
        """
        return self._t.year, self._t.month, self._t.day

    def weekday(self) -> int:
        """Return the day of the week, where Monday is 0 and Sunday is 6.

        Examples:
            >>> Date(2024, 1, 15).weekday()  # Monday
            0
        """
        return self._t.weekday()

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year
            366
        """
        return self._t.timetuple().tm_yday

    def iso_week(self) -> tuple[int, int]:
        """Return the ISO 8601 (year, week number) of this date.

        Examples:
            >>> Date(2021, 1, 3).iso_week()
            (2020, 53)
        """
        iso = self._t.isocalendar()
        return iso.year, iso.week

    def is_zero(self) -> bool:
        """Return True if this is the zero Date, 0001-01-01."""
        return self._t == INSTANT_EPOCH

    def unix(self) -> int:
        """Return the Unix time of midnight UTC on this date, in seconds."""
        return unix_seconds(self._t)

    def unix_milli(self) -> int:
        """Return the Unix time of this date in milliseconds."""
        return unix_milli(self._t)

    def unix_micro(self) -> int:
        """Return the Unix time of this date in microseconds."""
        return unix_micro(self._t)

    def unix_nano(self) -> int:
        """Return the Unix time of this date in nanoseconds."""
        return unix_nano(self._t)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add_date(self, years: int = 0, months: int = 0, days: int = 0) -> Date:
        """Add years, months and days with overflow normalization.

        Months carry into years first. The day offset is then counted from
        the first of the resulting month, so a day past the end of a month
        rolls into the next one.

        Raises:
            ValidationError: If the result leaves years 1-9999.

        Examples:
            >>> Date(2024, 1, 31).add_date(months=1)
            Date(2024, 3, 2)

            >>> Date(2024, 1, 15).add_date(days=-15)
            Date(2023, 12, 31)
        """
        y, m, d = self.ymd()
        return self._from_instant(normalize_date(y + years, m + months, d + days))

    def add_months_no_overflow(self, months: int) -> Date:
        """Add months without rolling past the end of the target month.

        When the target month is shorter than the current day of month,
        the result is clamped to the last day of the target month.
        Negative values travel into the past.

        Examples:
            >>> Date(2024, 1, 31).add_months_no_overflow(1)
            Date(2024, 2, 29)

            >>> Date(2024, 3, 31).add_months_no_overflow(-1)
            Date(2024, 2, 29)
        """
        added = self.add_date(months=months)
        if added.day != self.day:
            return added.previous_month_last_day()
        return added

    def previous_month_last_day(self) -> Date:
        """Return the last day of the previous month.

        Examples:
            >>> Date(2024, 3, 15).previous_month_last_day()
            Date(2024, 2, 29)
        """
        return self._from_instant(normalize_date(self.year, self.month, 0))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal(self, other: Date) -> bool:
        """Return True if both dates are the same day."""
        return comparisons.equal(self, other)

    def after(self, other: Date) -> bool:
        """Return True if this date is strictly after ``other``."""
        return comparisons.after(self, other)

    def after_or_equal(self, other: Date) -> bool:
        """Return True if this date is after or the same as ``other``."""
        return comparisons.after_or_equal(self, other)

    def before(self, other: Date) -> bool:
        """Return True if this date is strictly before ``other``."""
        return comparisons.before(self, other)

    def before_or_equal(self, other: Date) -> bool:
        """Return True if this date is before or the same as ``other``."""
        return comparisons.before_or_equal(self, other)

    def between(self, start: Date, end: Date) -> bool:
        """Return True if this date lies strictly between start and end.

        Examples:
            >>> d = Date(2024, 1, 15)
            >>> d.between(d, Date(2024, 2, 1))
            False
            >>> d.between(Date(2024, 1, 1), Date(2024, 2, 1))
            True
        """
        return comparisons.between(self, start, end)

    def between_or_equal(self, start: Date, end: Date) -> bool:
        """Return True if this date lies in [start, end]."""
        return comparisons.between_or_equal(self, start, end)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def format(self, layout: str) -> str:
        """Format this date using strftime directives.

        ``%Y`` is not zero-padded before year 1000 on every platform; see
        :func:`chronal.format.layout.format_layout`.

        Examples:
            >>> Date(2024, 1, 15).format("%d.%m.%Y")
            '15.01.2024'
        """
        return format_layout(self._t, layout)

    def to_text(self) -> str:
        """Return the canonical YYYY-MM-DD text."""
        return format_full_date(self._t)

    @classmethod
    def from_text(cls, data: str | bytes) -> Date:
        """Create a Date from its canonical text, given as str or ASCII bytes."""
        return cls.from_string(text_of(data, DATE_LAYOUT))

    def to_json(self) -> str:
        """Return the date as a JSON string.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            '"2024-01-15"'
        """
        return encode_json_text(self.to_text())

    @classmethod
    def from_json(cls, data: str | bytes) -> Date:
        """Create a Date from a JSON string holding YYYY-MM-DD.

        Raises:
            ParseError: If the document is not a quoted YYYY-MM-DD string.
        """
        return cls.from_string(decode_json_text(data))

    def to_bytes(self) -> bytes:
        """Return the 4 byte packed representation.

        Examples:
            >>> Date(2000, 1, 2).to_bytes().hex()
            'd0470800'
        """
        return pack_date(self._t)

    @classmethod
    def from_bytes(cls, data: bytes) -> Date:
        """Create a Date from its 4 byte packed representation.

        Raises:
            DecodeError: If ``data`` is not 4 bytes or holds an impossible
                date.
        """
        return cls._from_instant(unpack_date(data))

    def sql_value(self) -> str:
        """Return the SQL DATE parameter for this date.

        Examples:
            >>> Date(2000, 1, 2).sql_value()
            '2000-01-02'
        """
        return format_sql_date(self._t)

    @classmethod
    def scan(cls, value: Any) -> Date:
        """Create a Date from a value returned by a SQL driver.

        Accepted values:
            - None: the zero Date
            - int or float: Unix seconds, date taken in UTC (floats are
              truncated)
            - str, bytes, bytearray, memoryview: YYYY-MM-DD
            - datetime.date or datetime.datetime: its wall-clock date

        Raises:
            ScanError: If the value has any other type.
            ParseError: If textual data is not YYYY-MM-DD.

        Examples:
            >>> Date.scan("2000-01-02")
            Date(2000, 1, 2)
            >>> Date.scan(946771200)
            Date(2000, 1, 2)
            >>> Date.scan(None).is_zero()
            True
        """
        value = coerce_scan_value(value, cls.__name__)
        if value is None:
            return cls.zero()
        if isinstance(value, int):
            return cls.from_unix(value)
        if isinstance(value, str):
            return cls._from_instant(parse_sql_date(value))
        if isinstance(value, _datetime.date):
            return cls.from_datetime(value)
        raise unsupported(value, cls.__name__)

    # -------------------------------------------------------------------------
    # Dunder methods
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, 1, 15)
            True
            >>> Date(2024, 1, 15) == Date(2024, 1, 16)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.before(self, other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.before_or_equal(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.after(self, other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return comparisons.after_or_equal(self, other)

    def __hash__(self) -> int:
        return hash(since_epoch(self._t))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2024, 1, 15)'.
        """
        return f"Date({self._t.year}, {self._t.month}, {self._t.day})"

    def __str__(self) -> str:
        return self.to_text()


__all__ = ["Date"]
