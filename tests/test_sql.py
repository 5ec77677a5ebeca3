"""Tests for SQL parameter values, scanning and sqlite3 registration."""

from __future__ import annotations

import datetime
import logging
import sqlite3

import pytest

from chronal import Date, DateTime, TimeOfDay, fixed_offset, register_sqlite
from chronal.convert.sql import coerce_scan_value
from chronal.errors import ParseError, ScanError, ValidationError
from chronal.units.timezone import UTC


class TestCoerceScanValue:
    """Tests for normalizing driver values."""

    def test_null(self) -> None:
        """Test that NULL passes through as None."""
        assert coerce_scan_value(None, "Date") is None

    def test_float_is_truncated(self) -> None:
        """Test that floats truncate toward zero."""
        assert coerce_scan_value(1.9, "Date") == 1
        assert coerce_scan_value(-1.9, "Date") == -1
        assert isinstance(coerce_scan_value(2.0, "Date"), int)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float(self, value: float) -> None:
        """Test that NaN and infinities are rejected."""
        with pytest.raises(ValidationError):
            coerce_scan_value(value, "Date")

    def test_bool_is_rejected(self) -> None:
        """Test that bools are not taken for Unix seconds."""
        with pytest.raises(ScanError, match="cannot scan bool into Date"):
            coerce_scan_value(True, "Date")

    def test_bytes_like(self) -> None:
        """Test that bytes-like values decode to text."""
        for raw in (b"2000-01-02", bytearray(b"2000-01-02"), memoryview(b"2000-01-02")):
            assert coerce_scan_value(raw, "Date") == "2000-01-02"

    def test_non_ascii_bytes(self) -> None:
        """Test that non-ASCII bytes raise ParseError."""
        with pytest.raises(ParseError):
            coerce_scan_value("2000-01-0２".encode(), "Date")

    def test_other_values_pass_through(self) -> None:
        """Test that unrecognized values are returned unchanged."""
        value = datetime.date(2000, 1, 2)
        assert coerce_scan_value(value, "Date") is value

    def test_logs_null_and_truncation(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the debug records for NULL and truncated floats."""
        with caplog.at_level(logging.DEBUG, logger="chronal.convert.sql"):
            coerce_scan_value(None, "Date")
            coerce_scan_value(1.5, "DateTime")
        messages = [record.getMessage() for record in caplog.records]
        assert "scan of NULL into Date yields the zero value" in messages
        assert any("truncated Unix time 1.5" in m for m in messages)


class TestDateSQL:
    """Tests for Date SQL interop."""

    def test_sql_value(self) -> None:
        """Test the bound parameter."""
        assert Date(2000, 1, 2).sql_value() == "2000-01-02"

    def test_scan(self) -> None:
        """Test each accepted driver value."""
        expected = Date(2000, 1, 2)
        assert Date.scan("2000-01-02") == expected
        assert Date.scan(b"2000-01-02") == expected
        assert Date.scan(946771200) == expected
        assert Date.scan(946771200.75) == expected
        assert Date.scan(datetime.date(2000, 1, 2)) == expected
        assert Date.scan(datetime.datetime(2000, 1, 2, 23, 59)) == expected

    def test_scan_null_is_zero(self) -> None:
        """Test that NULL scans as the zero Date."""
        assert Date.scan(None) == Date.zero()

    def test_scan_unsupported(self) -> None:
        """Test that other types raise ScanError."""
        with pytest.raises(ScanError, match="cannot scan list into Date"):
            Date.scan([2000, 1, 2])
        with pytest.raises(ScanError):
            Date.scan(False)

    def test_scan_bad_text(self) -> None:
        """Test that malformed text raises ParseError."""
        with pytest.raises(ParseError):
            Date.scan("2000-01-02 00:00:00")


class TestTimeOfDaySQL:
    """Tests for TimeOfDay SQL interop."""

    def test_sql_value(self) -> None:
        """Test the bound parameter."""
        assert TimeOfDay(3, 4, 5).sql_value() == "03:04:05+00"
        assert TimeOfDay(3, 4, 5, 250_000_000, fixed_offset(5, 30)).sql_value() == "03:04:05.25+05:30"

    def test_scan_text(self) -> None:
        """Test scanning the SQL time layout."""
        t = TimeOfDay.scan("03:04:05.25+05:30")
        assert t.clock() == (3, 4, 5)
        assert t.microsecond == 250_000
        assert t.zone()[1] == 19800
        assert TimeOfDay.scan(b"03:04:05+00") == TimeOfDay(3, 4, 5)

    def test_scan_unix_seconds(self) -> None:
        """Test that Unix seconds give the UTC clock reading."""
        assert TimeOfDay.scan(946695845) == TimeOfDay(3, 4, 5)

    def test_scan_native_values(self) -> None:
        """Test scanning standard library values."""
        assert TimeOfDay.scan(datetime.time(3, 4, 5)) == TimeOfDay(3, 4, 5)
        tz = fixed_offset(-7)
        t = TimeOfDay.scan(datetime.datetime(2000, 1, 2, 3, 4, 5, tzinfo=tz))
        assert t.clock() == (3, 4, 5)
        assert t.tzinfo is tz

    def test_scan_null_is_zero(self) -> None:
        """Test that NULL scans as the zero TimeOfDay."""
        assert TimeOfDay.scan(None).is_zero()

    def test_scan_unsupported(self) -> None:
        """Test that other types raise ScanError."""
        with pytest.raises(ScanError, match="into TimeOfDay"):
            TimeOfDay.scan(datetime.date(2000, 1, 2))


class TestDateTimeSQL:
    """Tests for DateTime SQL interop."""

    def test_sql_value(self) -> None:
        """Test that the parameter is written at second precision."""
        dt = DateTime(2000, 1, 2, 3, 4, 5, 600_000_000)
        assert dt.sql_value() == "2000-01-02 03:04:05+00"
        assert DateTime(2000, 1, 2, 3, 4, 5, tz=fixed_offset(-3, 30)).sql_value() == "2000-01-02 03:04:05-03:30"

    def test_scan_text(self) -> None:
        """Test scanning the SQL timestamp layout."""
        dt = DateTime.scan("2000-01-02 03:04:05.6+02")
        assert dt == DateTime(2000, 1, 2, 1, 4, 5, 600_000_000)
        assert dt.zone()[1] == 7200

    def test_scan_unix_seconds_is_utc(self) -> None:
        """Test that Unix seconds scan into UTC."""
        dt = DateTime.scan(946782245)
        assert dt == DateTime(2000, 1, 2, 3, 4, 5)
        assert dt.tzinfo is UTC

    def test_scan_datetime(self) -> None:
        """Test scanning an aware datetime."""
        source = datetime.datetime(2000, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert DateTime.scan(source).to_datetime() is source

    def test_scan_null_is_zero(self) -> None:
        """Test that NULL scans as the zero DateTime."""
        assert DateTime.scan(None).is_zero()

    def test_scan_unsupported(self) -> None:
        """Test that plain dates are not instants."""
        with pytest.raises(ScanError, match="cannot scan date into DateTime"):
            DateTime.scan(datetime.date(2000, 1, 2))


class TestRegisterSqlite:
    """Tests for sqlite3 adapters and converters."""

    @pytest.fixture
    def conn(self) -> sqlite3.Connection:
        register_sqlite()
        connection = sqlite3.connect(":memory:", detect_types=sqlite3.PARSE_DECLTYPES)
        connection.execute("CREATE TABLE events (day DATE, at TIME, stamp DATETIME)")
        return connection

    def test_round_trip(self, conn: sqlite3.Connection) -> None:
        """Test binding and reading back all three types."""
        row = (Date(2000, 1, 2), TimeOfDay(3, 4, 5, tz=fixed_offset(5, 30)), DateTime(2000, 1, 2, 3, 4, 5))
        conn.execute("INSERT INTO events VALUES (?, ?, ?)", row)
        day, at, stamp = conn.execute("SELECT day, at, stamp FROM events").fetchone()
        assert day == row[0]
        assert at == row[1]
        assert at.zone()[1] == 19800
        assert stamp == row[2]
        conn.close()

    def test_stored_text(self, conn: sqlite3.Connection) -> None:
        """Test that parameters are stored as SQL text."""
        conn.execute("INSERT INTO events (day) VALUES (?)", (Date(2000, 1, 2),))
        assert conn.execute("SELECT CAST(day AS TEXT) FROM events").fetchone()[0] == "2000-01-02"
        conn.close()

    def test_null_bypasses_converter(self, conn: sqlite3.Connection) -> None:
        """Test that sqlite3 returns NULL columns as None."""
        conn.execute("INSERT INTO events (day) VALUES (NULL)")
        assert conn.execute("SELECT day FROM events").fetchone()[0] is None
        conn.close()

    def test_register_is_repeatable(self) -> None:
        """Test that registering twice is harmless."""
        register_sqlite()
        register_sqlite()
