"""Tests for the arithmetic and comparison functions."""

from __future__ import annotations

import datetime

import pytest

from chronal import Date, DateTime, TimeOfDay
from chronal.arithmetic import (
    add_calendar,
    add_elapsed,
    after,
    after_or_equal,
    before,
    before_or_equal,
    between,
    between_or_equal,
    clock_micros,
    compare,
    equal,
    round_delta,
    shift_clock,
    since_epoch,
    truncate_delta,
)
from chronal.errors import ValidationError
from chronal.units.timezone import UTC, fixed_offset

HOUR = datetime.timedelta(hours=1)


class TestComparisons:
    """Tests for the shared comparison suite."""

    def test_ordering(self) -> None:
        """Test each predicate on an ordered pair."""
        a, b = Date(2024, 1, 15), Date(2024, 1, 16)
        assert before(a, b) and not before(b, a)
        assert after(b, a) and not after(a, b)
        assert before_or_equal(a, a) and after_or_equal(a, a)
        assert equal(a, Date(2024, 1, 15))
        assert not equal(a, b)

    def test_compare(self) -> None:
        """Test three-way comparison."""
        a, b = TimeOfDay(9), TimeOfDay(10)
        assert compare(a, b) == -1
        assert compare(b, a) == 1
        assert compare(a, TimeOfDay(9)) == 0

    def test_between(self) -> None:
        """Test that the exclusive range excludes its endpoints."""
        start, end = DateTime(2024, 1, 1), DateTime(2024, 1, 3)
        assert between(DateTime(2024, 1, 2), start, end)
        assert not between(start, start, end)
        assert not between(end, start, end)
        assert between_or_equal(start, start, end)
        assert between_or_equal(end, start, end)

    def test_absolute_instants(self) -> None:
        """Test that zones are taken into account."""
        utc = TimeOfDay(12)
        ahead = TimeOfDay(17, 30, tz=fixed_offset(5, 30))
        assert equal(utc, ahead)
        assert before(TimeOfDay(17, tz=fixed_offset(5, 30)), utc)

    def test_mixed_types(self) -> None:
        """Test that different value types cannot be compared."""
        with pytest.raises(TypeError, match="cannot compare Date < DateTime"):
            before(Date(2024, 1, 15), DateTime(2024, 1, 15))  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            compare(TimeOfDay(1), Date(2024, 1, 15))  # type: ignore[arg-type]

    def test_mixed_types_via_operators(self) -> None:
        """Test that operators fall back to Python's TypeError."""
        assert Date(2024, 1, 15) != DateTime(2024, 1, 15)
        with pytest.raises(TypeError):
            Date(2024, 1, 15) < DateTime(2024, 1, 15)  # type: ignore[operator]

    def test_same_zone_fold(self, paris: datetime.tzinfo) -> None:
        """Test that two instants in one zone differing only in fold are ordered."""
        first = DateTime.from_datetime(datetime.datetime(2024, 10, 27, 2, 30, tzinfo=paris, fold=0))
        second = DateTime.from_datetime(datetime.datetime(2024, 10, 27, 2, 30, tzinfo=paris, fold=1))
        assert before(first, second)
        assert second - first == HOUR


class TestElapsed:
    """Tests for elapsed-time arithmetic."""

    def test_since_epoch(self) -> None:
        """Test the distance from 0001-01-01T00:00:00Z."""
        assert since_epoch(datetime.datetime(1, 1, 2, tzinfo=UTC)) == datetime.timedelta(days=1)
        assert since_epoch(datetime.datetime(1, 1, 1, 5, tzinfo=fixed_offset(5))) == datetime.timedelta(0)

    def test_add_elapsed_fixed(self) -> None:
        """Test adding to a fixed-offset instant."""
        tz = fixed_offset(-7)
        value = datetime.datetime(2024, 1, 15, 23, tzinfo=tz)
        result = add_elapsed(value, 2 * HOUR)
        assert result == datetime.datetime(2024, 1, 16, 1, tzinfo=tz)
        assert result.tzinfo is tz

    def test_add_elapsed_overflow(self) -> None:
        """Test that leaving the supported years raises ValidationError."""
        with pytest.raises(ValidationError, match="out of range"):
            add_elapsed(datetime.datetime(9999, 12, 31, 23, tzinfo=UTC), 2 * HOUR)
        with pytest.raises(ValidationError):
            add_elapsed(datetime.datetime(1, 1, 1, tzinfo=UTC), -HOUR)


class TestCalendar:
    """Tests for calendar addition."""

    @pytest.mark.parametrize(
        ("start", "years", "months", "days", "expected"),
        [
            ((2023, 1, 31), 0, 1, 0, (2023, 3, 3)),
            ((2024, 1, 31), 0, 1, 0, (2024, 3, 2)),
            ((2024, 2, 29), 1, 0, 0, (2025, 3, 1)),
            ((2024, 3, 31), 0, -1, 0, (2024, 3, 2)),
            ((2024, 1, 1), 0, 0, -1, (2023, 12, 31)),
            ((2024, 1, 15), 0, 25, 0, (2026, 2, 15)),
        ],
    )
    def test_add_calendar(
        self,
        start: tuple[int, int, int],
        years: int,
        months: int,
        days: int,
        expected: tuple[int, int, int],
    ) -> None:
        """Test normalization of overflowing days and months."""
        value = datetime.datetime(*start, 12, tzinfo=UTC)
        result = add_calendar(value, years, months, days)
        assert (result.year, result.month, result.day) == expected
        assert result.time() == datetime.time(12)

    def test_add_calendar_out_of_range(self) -> None:
        """Test that years past 9999 raise ValidationError."""
        with pytest.raises(ValidationError):
            add_calendar(datetime.datetime(9999, 12, 1, tzinfo=UTC), 0, 1, 0)


class TestRounding:
    """Tests for rounding and truncation deltas."""

    def test_truncate(self) -> None:
        """Test truncation to a quarter hour."""
        value = datetime.datetime(2024, 1, 15, 14, 37, tzinfo=UTC)
        step = datetime.timedelta(minutes=15)
        assert value + truncate_delta(value, step) == datetime.datetime(2024, 1, 15, 14, 30, tzinfo=UTC)

    def test_round_half_up(self) -> None:
        """Test that halfway values round up."""
        value = datetime.datetime(2024, 1, 15, 14, 30, tzinfo=UTC)
        assert round_delta(value, HOUR) == datetime.timedelta(minutes=30)
        earlier = value - datetime.timedelta(microseconds=1)
        assert round_delta(earlier, HOUR) == -datetime.timedelta(minutes=29, seconds=59, microseconds=999_999)

    @pytest.mark.parametrize("step", [datetime.timedelta(0), -HOUR, datetime.timedelta(microseconds=-1)])
    def test_non_positive_step(self, step: datetime.timedelta) -> None:
        """Test that a non-positive step is a no-op."""
        value = datetime.datetime(2024, 1, 15, 14, 37, tzinfo=UTC)
        assert truncate_delta(value, step) == datetime.timedelta(0)
        assert round_delta(value, step) == datetime.timedelta(0)

    def test_multiple_is_absolute(self) -> None:
        """Test that steps are counted on absolute time."""
        value = datetime.datetime(2024, 1, 15, 14, tzinfo=fixed_offset(5, 30))
        result = value + truncate_delta(value, datetime.timedelta(days=1))
        assert result.astimezone(UTC) == datetime.datetime(2024, 1, 15, tzinfo=UTC)


class TestClock:
    """Tests for clock-dial helpers."""

    def test_clock_micros(self) -> None:
        """Test microseconds since midnight."""
        assert clock_micros(datetime.time(0, 0, 1, 5)) == 1_000_005
        assert clock_micros(datetime.datetime(1, 1, 1, 23, 59, 59, 999_999)) == 86_400_000_000 - 1

    def test_shift_clock_wraps(self) -> None:
        """Test wrapping in both directions without touching the date."""
        value = datetime.datetime(1, 1, 1, 23, 30, tzinfo=UTC)
        assert shift_clock(value, HOUR) == datetime.datetime(1, 1, 1, 0, 30, tzinfo=UTC)
        assert shift_clock(value, -24 * HOUR) == value
        start = datetime.datetime(1, 1, 1, 0, 15, tzinfo=fixed_offset(9))
        assert shift_clock(start, -HOUR).time() == datetime.time(23, 15)
