"""Tests for the zone helpers.

These tests cover fixed offsets, offset text in both the RFC 3339 and
SQL dialects, and the rule that decides which tzinfo a parsed
wall-clock reading is attached to.
"""

from __future__ import annotations

import datetime

import pytest


class TestFixedOffset:
    """Tests for fixed_offset() and zone_for_offset()."""

    def test_zero_is_utc_singleton(self) -> None:
        """A zero offset returns datetime.timezone.utc itself."""
        from chronal.units.timezone import UTC, fixed_offset, zone_for_offset

        assert fixed_offset(0) is UTC
        assert zone_for_offset(datetime.timedelta(0)) is UTC

    def test_positive_with_minutes(self) -> None:
        """Hours and minutes add up."""
        from chronal.units.timezone import fixed_offset

        assert fixed_offset(5, 30).utcoffset(None) == datetime.timedelta(hours=5, minutes=30)

    def test_negative_with_minutes(self) -> None:
        """Minutes follow the sign of the hours."""
        from chronal.units.timezone import fixed_offset

        assert fixed_offset(-3, 30).utcoffset(None) == -datetime.timedelta(hours=3, minutes=30)

    @pytest.mark.parametrize("minutes", [-1, 60])
    def test_invalid_minutes(self, minutes: int) -> None:
        """Minutes outside 0-59 are rejected."""
        from chronal.errors import ValidationError
        from chronal.units.timezone import fixed_offset

        with pytest.raises(ValidationError, match="minutes must be 0-59"):
            fixed_offset(1, minutes)

    @pytest.mark.parametrize("hours", [24, -24])
    def test_offset_out_of_range(self, hours: int) -> None:
        """Offsets of a whole day or more are rejected."""
        from chronal.errors import ValidationError
        from chronal.units.timezone import fixed_offset

        with pytest.raises(ValidationError, match="outside"):
            fixed_offset(hours)


class TestMinuteZone:
    """Tests for minute_zone()."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(561, 540), (-17762, -17760), (-30, 0), (19800, 19800), (86_399, 86_340)],
    )
    def test_truncates_toward_zero(self, seconds: int, expected: int) -> None:
        """Offset seconds are dropped the same way format_offset drops them."""
        from chronal.units.timezone import format_offset, minute_zone, parse_offset

        offset = datetime.timedelta(seconds=seconds)
        tz = minute_zone(offset)
        assert tz.utcoffset(None) == datetime.timedelta(seconds=expected)
        assert parse_offset(format_offset(offset)) == tz.utcoffset(None)

    def test_keeps_matching_fixed_zone(self, plus_0530: datetime.tzinfo) -> None:
        """A fixed zone already in whole minutes is returned itself."""
        from chronal.units.timezone import minute_zone

        assert minute_zone(datetime.timedelta(hours=5, minutes=30), plus_0530) is plus_0530

    def test_missing_offset_is_utc(self) -> None:
        """No offset means UTC."""
        from chronal.units.timezone import UTC, minute_zone

        assert minute_zone(None) is UTC
        assert minute_zone(datetime.timedelta(seconds=59)) is UTC


class TestFormatOffset:
    """Tests for format_offset()."""

    @pytest.mark.parametrize(
        ("seconds", "kwargs", "expected"),
        [
            (0, {}, "Z"),
            (0, {"zulu": False}, "+00:00"),
            (0, {"zulu": False, "short": True}, "+00"),
            (19800, {}, "+05:30"),
            (19800, {"short": True}, "+05:30"),
            (-25200, {}, "-07:00"),
            (-25200, {"zulu": False, "short": True}, "-07"),
            (-17762, {}, "-04:56"),
            (-30, {}, "+00:00"),
        ],
    )
    def test_format(self, seconds: int, kwargs: dict[str, bool], expected: str) -> None:
        """Offsets are written in the requested dialect."""
        from chronal.units.timezone import format_offset

        assert format_offset(datetime.timedelta(seconds=seconds), **kwargs) == expected


class TestParseOffset:
    """Tests for parse_offset()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Z", datetime.timedelta(0)),
            ("+05:30", datetime.timedelta(hours=5, minutes=30)),
            ("-0530", -datetime.timedelta(hours=5, minutes=30)),
            ("+07", datetime.timedelta(hours=7)),
            ("-00:00", datetime.timedelta(0)),
            ("+23:59", datetime.timedelta(hours=23, minutes=59)),
        ],
    )
    def test_valid(self, text: str, expected: datetime.timedelta) -> None:
        """Colon, no-colon and hours-only forms parse."""
        from chronal.units.timezone import parse_offset

        assert parse_offset(text) == expected

    @pytest.mark.parametrize("text", ["z", "UTC", "+5", "05:00", "+05:3", " +05:00", "+05:00 ", "+24:00", "+05:60"])
    def test_invalid(self, text: str) -> None:
        """Anything else raises ParseError."""
        from chronal.errors import ParseError
        from chronal.units.timezone import parse_offset

        with pytest.raises(ParseError):
            parse_offset(text)


class TestResolveZone:
    """Tests for resolve_zone()."""

    def test_matching_zone_is_kept(self, paris: datetime.tzinfo) -> None:
        """A zone with the parsed offset at that wall clock is used."""
        from chronal.units.timezone import resolve_zone

        wall = datetime.datetime(2024, 7, 1, 12)
        assert resolve_zone(wall, datetime.timedelta(hours=2), paris) is paris
        assert resolve_zone(wall, datetime.timedelta(hours=1), paris) is not paris

    def test_without_zone(self) -> None:
        """Without a zone the offset becomes a fixed zone."""
        from chronal.units.timezone import UTC, resolve_zone

        wall = datetime.datetime(2024, 7, 1, 12)
        assert resolve_zone(wall, datetime.timedelta(0)) is UTC
        tz = resolve_zone(wall, datetime.timedelta(hours=-7))
        assert tz.utcoffset(None) == datetime.timedelta(hours=-7)


class TestZoneQueries:
    """Tests for zone_of(), utc_offset(), in_zone() and local_zone()."""

    def test_zone_of(self, minus_0700: datetime.tzinfo) -> None:
        """Name and offset in seconds are returned."""
        from chronal.units.timezone import zone_of

        value = datetime.datetime(2024, 1, 15, tzinfo=minus_0700)
        assert zone_of(value) == ("UTC-07:00", -25200)
        assert zone_of(datetime.datetime(2024, 1, 15, tzinfo=datetime.timezone.utc)) == ("UTC", 0)

    def test_utc_offset_naive(self) -> None:
        """Naive values have a zero offset."""
        from chronal.units.timezone import utc_offset

        assert utc_offset(datetime.datetime(2024, 1, 15)) == datetime.timedelta(0)

    def test_in_zone(self, plus_0530: datetime.tzinfo) -> None:
        """The same instant is re-expressed in the target zone."""
        from chronal.units.timezone import UTC, in_zone

        value = datetime.datetime(2024, 1, 15, 12, tzinfo=UTC)
        moved = in_zone(value, plus_0530)
        assert moved == value
        assert moved.hour == 17 and moved.minute == 30

    def test_in_zone_overflow(self) -> None:
        """Wall clocks past year 9999 raise ValidationError."""
        from chronal.errors import ValidationError
        from chronal.units.timezone import UTC, fixed_offset, in_zone

        with pytest.raises(ValidationError, match="cannot be expressed"):
            in_zone(datetime.datetime(9999, 12, 31, 23, tzinfo=UTC), fixed_offset(2))

    def test_local_zone(self, local_tz_utc: None) -> None:
        """The local zone follows the process TZ setting."""
        from chronal.units.timezone import local_zone

        assert local_zone().utcoffset(None) == datetime.timedelta(0)
