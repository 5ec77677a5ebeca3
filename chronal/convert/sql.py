"""SQL driver interop.

``sql_value()`` on each value type produces the parameter a DB-API
driver should bind; ``scan()`` consumes whatever a driver hands back.
Drivers differ in what they return for date and time columns: text,
raw bytes, Unix timestamps or the standard library's own ``date``,
``time`` and ``datetime`` objects. :func:`coerce_scan_value` folds those
shapes into a small set the value types dispatch on.

:func:`register_sqlite` wires the three value types into the standard
library ``sqlite3`` module.

Examples:
    >>> import sqlite3
    >>> from chronal import Date
    >>> from chronal.convert.sql import register_sqlite

    >>> register_sqlite()
    >>> conn = sqlite3.connect(":memory:", detect_types=sqlite3.PARSE_DECLTYPES)
    >>> _ = conn.execute("CREATE TABLE t (d DATE)")
    >>> _ = conn.execute("INSERT INTO t VALUES (?)", (Date(2000, 1, 2),))
    >>> conn.execute("SELECT d FROM t").fetchone()[0]
    Date(2000, 1, 2)
"""

from __future__ import annotations

import logging
import math
import sqlite3
from typing import Any

from chronal.errors import ScanError, ValidationError
from chronal.format.fields import text_of

logger = logging.getLogger(__name__)


def unsupported(value: object, target: str) -> ScanError:
    """Build the error for a driver value ``target`` cannot be scanned from."""
    return ScanError(f"cannot scan {type(value).__name__} into {target}")


def coerce_scan_value(value: Any, target: str) -> Any:
    """Normalize a driver value before a value type interprets it.

    Returns:
        ``None`` for SQL NULL, an ``int`` for Unix seconds (floats are
        truncated toward zero), a ``str`` for textual data (bytes-like
        values are decoded as ASCII), or ``value`` unchanged for any
        other type.

    Raises:
        ScanError: If ``value`` is a bool.
        ParseError: If bytes-like data is not ASCII.
        ValidationError: If a float is NaN or infinite.
    """
    if value is None:
        logger.debug("scan of NULL into %s yields the zero value", target)
        return None
    if isinstance(value, bool):
        raise unsupported(value, target)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValidationError(f"cannot scan {value!r} into {target}")
        seconds = math.trunc(value)
        if seconds != value:
            logger.debug(
                "truncated Unix time %r to %d seconds for %s", value, seconds, target
            )
        return seconds
    if isinstance(value, (bytes, bytearray, memoryview)):
        return text_of(value, target)
    return value


def register_sqlite() -> None:
    """Register sqlite3 adapters and converters for the value types.

    Adapters let Date, TimeOfDay and DateTime be bound as query
    parameters. Converters turn columns declared ``DATE``, ``TIME`` and
    ``DATETIME`` back into value types on connections opened with
    ``detect_types=sqlite3.PARSE_DECLTYPES``.

    Registration is process-wide and replaces sqlite3's own ``DATE``
    converter. Calling this more than once is harmless.
    """
    # Import here to avoid circular imports
    from chronal.core.date import Date
    from chronal.core.datetime import DateTime
    from chronal.core.time import TimeOfDay

    for cls, decltype in ((Date, "DATE"), (TimeOfDay, "TIME"), (DateTime, "DATETIME")):
        sqlite3.register_adapter(cls, cls.sql_value)
        sqlite3.register_converter(decltype, cls.scan)
        logger.debug("registered sqlite3 adapter and %s converter for %s", decltype, cls.__name__)


__all__ = [
    "coerce_scan_value",
    "register_sqlite",
    "unsupported",
]
