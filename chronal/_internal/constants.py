"""Internal constants for Chronal.

These constants define the limits, reference points and wire layouts
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
MICROS_PER_MILLISECOND: int = 1_000
MICROS_PER_SECOND: int = 1_000_000
SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
MICROS_PER_DAY: int = SECONDS_PER_DAY * MICROS_PER_SECOND

# Year limits imposed by the standard library instant
MIN_YEAR: int = _datetime.MINYEAR
MAX_YEAR: int = _datetime.MAXYEAR

UTC: _datetime.timezone = _datetime.timezone.utc

# Calendar date every TimeOfDay is pinned to
REFERENCE_YEAR: int = 1
REFERENCE_MONTH: int = 1
REFERENCE_DAY: int = 1

# Zero point of the generic instant encoding and of absolute rounding
INSTANT_EPOCH: _datetime.datetime = _datetime.datetime(1, 1, 1, tzinfo=UTC)
UNIX_EPOCH: _datetime.datetime = _datetime.datetime(1970, 1, 1, tzinfo=UTC)

# Packed Date layout, counted from the least significant bit
DATE_BINARY_SIZE: int = 4
DATE_YEAR_BITS: int = 14
DATE_MONTH_BITS: int = 4
DATE_DAY_BITS: int = 5
DATE_MONTH_SHIFT: int = DATE_YEAR_BITS
DATE_DAY_SHIFT: int = DATE_YEAR_BITS + DATE_MONTH_BITS
DATE_YEAR_MASK: int = 0x3FFF
DATE_MONTH_MASK: int = 0xF
DATE_DAY_MASK: int = 0x1F

# Generic instant encoding
INSTANT_BINARY_VERSION: int = 1
ZONE_KIND_UTC: int = 0
ZONE_KIND_FIXED: int = 1

# Fractional digits written by the SQL time layout (postgres/mysql use micros)
SQL_TIME_FRACTION_DIGITS: int = 6


__all__ = [
    "NANOS_PER_MICROSECOND",
    "MICROS_PER_MILLISECOND",
    "MICROS_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MICROS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "UTC",
    "REFERENCE_YEAR",
    "REFERENCE_MONTH",
    "REFERENCE_DAY",
    "INSTANT_EPOCH",
    "UNIX_EPOCH",
    "DATE_BINARY_SIZE",
    "DATE_YEAR_BITS",
    "DATE_MONTH_BITS",
    "DATE_DAY_BITS",
    "DATE_MONTH_SHIFT",
    "DATE_DAY_SHIFT",
    "DATE_YEAR_MASK",
    "DATE_MONTH_MASK",
    "DATE_DAY_MASK",
    "INSTANT_BINARY_VERSION",
    "ZONE_KIND_UTC",
    "ZONE_KIND_FIXED",
    "SQL_TIME_FRACTION_DIGITS",
]
