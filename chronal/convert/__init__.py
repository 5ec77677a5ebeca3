"""Conversion utilities.

This module provides functions for converting instants and Chronal
values to and from other representations:
    - Binary wire formats (packed date, instant)
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds, microseconds, nanoseconds)
    - SQL driver interop and sqlite3 registration

Examples:
    >>> from chronal import DateTime
    >>> from chronal.convert import to_json, from_json

    >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
    >>> data = to_json(dt)
    >>> restored = from_json(DateTime, data)
    >>> restored == dt
    True
"""

from __future__ import annotations

from chronal.convert.binary import (
    INSTANT_BINARY_SIZE,
    decode_instant,
    encode_instant,
    pack_date,
    unpack_date,
)
from chronal.convert.epoch import (
    instant_from_unix,
    instant_from_unix_micro,
    instant_from_unix_milli,
    unix_micro,
    unix_milli,
    unix_nano,
    unix_seconds,
)
from chronal.convert.json import (
    JSONEncoder,
    decode_json_text,
    encode_json_text,
    from_json,
    to_json,
)
from chronal.convert.sql import coerce_scan_value, register_sqlite, unsupported

__all__ = [
    # Binary
    "INSTANT_BINARY_SIZE",
    "pack_date",
    "unpack_date",
    "encode_instant",
    "decode_instant",
    # JSON
    "JSONEncoder",
    "encode_json_text",
    "decode_json_text",
    "to_json",
    "from_json",
    # Epoch
    "instant_from_unix",
    "instant_from_unix_milli",
    "instant_from_unix_micro",
    "unix_seconds",
    "unix_milli",
    "unix_micro",
    "unix_nano",
    # SQL
    "coerce_scan_value",
    "register_sqlite",
    "unsupported",
]
