"""Chronal: calendar dates, clock readings and instants over the stdlib.

Chronal wraps ``datetime.datetime`` in three immutable value types that
each keep only the information they are meant to carry, and adds the
wire formats those types need: a compact binary date, canonical RFC 3339
text, JSON, and SQL driver values.

Core Types:
    Date: Calendar date, clock pinned to midnight UTC
    TimeOfDay: Clock reading in a zone, date pinned to 0001-01-01
    DateTime: Aware instant with full fidelity

Units:
    UTC: The UTC tzinfo
    fixed_offset: Build a fixed-offset tzinfo

Interop:
    JSONEncoder: ``json.JSONEncoder`` for documents holding Chronal values
    register_sqlite: Register the value types with ``sqlite3``

SQLAlchemy column types live in :mod:`chronal.sqltypes`.

Exceptions:
    ChronalError: Base exception
    ValidationError: Invalid input values
    ParseError: Failed to parse text
    DecodeError: Failed to decode binary data
    ScanError: Unsupported SQL driver value

Example:
    >>> import datetime
    >>> from chronal import Date, DateTime
    >>> d = Date(2024, 1, 31)
    >>> d.add_months_no_overflow(1)
    Date(2024, 2, 29)
    >>> DateTime(2024, 1, 15, 12) + datetime.timedelta(hours=1)
    DateTime(2024, 1, 15, 13, 0, 0, nanosecond=0, tz=datetime.timezone.utc)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronal.core.date import Date
from chronal.core.datetime import DateTime
from chronal.core.time import TimeOfDay

# Units
from chronal.units.timezone import UTC, fixed_offset

# Interop
from chronal.convert.json import JSONEncoder
from chronal.convert.sql import register_sqlite

# Exceptions
from chronal.errors import (
    ChronalError,
    DecodeError,
    ParseError,
    ScanError,
    ValidationError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "TimeOfDay",
    # Units
    "UTC",
    "fixed_offset",
    # Interop
    "JSONEncoder",
    "register_sqlite",
    # Exceptions
    "ChronalError",
    "ValidationError",
    "ParseError",
    "DecodeError",
    "ScanError",
]
