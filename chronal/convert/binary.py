"""Binary wire formats.

Two layouts are supported:

Packed date (4 bytes, little-endian unsigned 32-bit word):

    bits  0-13  year  (0x3FFF mask)
    bits 14-17  month (0xF mask)
    bits 18-22  day   (0x1F mask)
    bits 23-31  unused, written as zero and ignored on decode

Instant (18 bytes, big-endian), used by TimeOfDay and DateTime:

    version       u8   always 1
    zone kind     u8   0 = UTC, 1 = fixed offset
    seconds       i64  seconds since 0001-01-01T00:00:00Z
    nanoseconds   i32  0 to 999,999,999
    offset        i32  UTC offset in seconds

Zone names are not preserved. A value in ``zoneinfo.ZoneInfo("Europe/Paris")``
decodes as a fixed-offset zone with the offset that was in effect.

Examples:
    >>> import datetime
    >>> pack_date(datetime.date(2000, 1, 2)).hex()
    'd0470800'
    >>> unpack_date(bytes.fromhex("d0470800")).date()
    datetime.date(2000, 1, 2)
"""

from __future__ import annotations

import datetime as _datetime
import struct

from chronal._internal.constants import (
    DATE_BINARY_SIZE,
    DATE_DAY_MASK,
    DATE_DAY_SHIFT,
    DATE_MONTH_MASK,
    DATE_MONTH_SHIFT,
    DATE_YEAR_MASK,
    INSTANT_BINARY_VERSION,
    INSTANT_EPOCH,
    NANOS_PER_MICROSECOND,
    UTC,
    ZONE_KIND_FIXED,
    ZONE_KIND_UTC,
)
from chronal.errors import DecodeError, ValidationError
from chronal.units.timezone import utc_offset, zone_for_offset

_DATE_STRUCT = struct.Struct("<I")
_INSTANT_STRUCT = struct.Struct(">BBqii")

INSTANT_BINARY_SIZE = _INSTANT_STRUCT.size

_NAIVE_EPOCH = INSTANT_EPOCH.replace(tzinfo=None)
_ONE_MICROSECOND = _datetime.timedelta(microseconds=1)


def _as_bytes(data: bytes | bytearray | memoryview, what: str, size: int) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes for {what}, got {type(data).__name__}")
    data = bytes(data)
    if len(data) != size:
        raise DecodeError(f"{what} must be {size} bytes, got {len(data)}")
    return data


def pack_date(value: _datetime.date) -> bytes:
    """Pack the calendar date of ``value`` into 4 bytes."""
    word = (
        value.year
        | value.month << DATE_MONTH_SHIFT
        | value.day << DATE_DAY_SHIFT
    )
    return _DATE_STRUCT.pack(word)


def unpack_date(data: bytes | bytearray | memoryview) -> _datetime.datetime:
    """Unpack 4 bytes into midnight UTC of the encoded date.

    Raises:
        DecodeError: If ``data`` is not 4 bytes long, or the decoded
            fields do not form a representable date (year 0, years past
            9999, month 0 or 13-15, day 0 or past the end of the month).
    """
    (word,) = _DATE_STRUCT.unpack(_as_bytes(data, "packed date", DATE_BINARY_SIZE))
    year = word & DATE_YEAR_MASK
    month = (word >> DATE_MONTH_SHIFT) & DATE_MONTH_MASK
    day = (word >> DATE_DAY_SHIFT) & DATE_DAY_MASK
    try:
        return _datetime.datetime(year, month, day, tzinfo=UTC)
    except ValueError as err:
        raise DecodeError(
            f"packed date {data.hex()} decodes to {year:04d}-{month:02d}-{day:02d}: {err}"
        ) from err


def encode_instant(value: _datetime.datetime) -> bytes:
    """Encode an aware instant into 18 bytes."""
    offset = utc_offset(value)
    micros = (value - INSTANT_EPOCH) // _ONE_MICROSECOND
    seconds, microsecond = divmod(micros, 1_000_000)
    kind = ZONE_KIND_FIXED if offset else ZONE_KIND_UTC
    return _INSTANT_STRUCT.pack(
        INSTANT_BINARY_VERSION,
        kind,
        seconds,
        microsecond * NANOS_PER_MICROSECOND,
        offset // _datetime.timedelta(seconds=1),
    )


def decode_instant(data: bytes | bytearray | memoryview) -> _datetime.datetime:
    """Decode 18 bytes into an aware instant.

    The wall-clock reading is rebuilt from the offset directly, so
    instants near 0001-01-01 with a positive offset do not overflow.

    Raises:
        DecodeError: On a wrong length, an unknown version or zone kind,
            or content the instant cannot represent.
    """
    version, kind, seconds, nanos, offset_seconds = _INSTANT_STRUCT.unpack(
        _as_bytes(data, "instant", INSTANT_BINARY_SIZE)
    )
    if version != INSTANT_BINARY_VERSION:
        raise DecodeError(f"unsupported instant encoding version {version}")
    if kind == ZONE_KIND_UTC:
        if offset_seconds:
            raise DecodeError(f"UTC instant carries offset {offset_seconds}s")
        tz: _datetime.tzinfo = UTC
    elif kind == ZONE_KIND_FIXED:
        try:
            tz = zone_for_offset(_datetime.timedelta(seconds=offset_seconds))
        except ValidationError as err:
            raise DecodeError(str(err)) from err
    else:
        raise DecodeError(f"unknown zone kind {kind}")
    if not 0 <= nanos < 1_000_000_000:
        raise DecodeError(f"nanoseconds out of range: {nanos}")

    try:
        wall = _NAIVE_EPOCH + _datetime.timedelta(
            seconds=seconds + offset_seconds,
            microseconds=nanos // NANOS_PER_MICROSECOND,
        )
    except OverflowError as err:
        raise DecodeError(f"instant {seconds}s is out of range") from err
    return wall.replace(tzinfo=tz)


__all__ = [
    "INSTANT_BINARY_SIZE",
    "pack_date",
    "unpack_date",
    "encode_instant",
    "decode_instant",
]
