"""SQLAlchemy column types for Chronal values.

Each type stores its value as text in the SQL layout of the value type
and hands back Chronal values on load:

    DateType        YYYY-MM-DD
    TimeOfDayType   HH:MM:SS[.ffffff]±HH[:MM]
    DateTimeType    YYYY-MM-DD HH:MM:SS±HH[:MM]

SQL NULL maps to Python ``None`` in both directions, as for any other
SQLAlchemy column type.

Example:
    >>> from sqlalchemy import Column, Integer, MetaData, Table
    >>> from chronal.sqltypes import DateType
    >>> events = Table(
    ...     "events",
    ...     MetaData(),
    ...     Column("id", Integer, primary_key=True),
    ...     Column("day", DateType(), nullable=True),
    ... )
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.engine import Dialect
from sqlalchemy.types import String, TypeDecorator

from chronal.core.date import Date
from chronal.core.datetime import DateTime
from chronal.core.time import TimeOfDay

logger = logging.getLogger(__name__)


class _ChronalType(TypeDecorator):
    """Shared bind/result processing for the Chronal column types."""

    impl = String
    cache_ok = True

    value_type: type = object

    @property
    def python_type(self) -> type:
        return self.value_type

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            logger.debug("binding NULL for %s column", self.value_type.__name__)
            return None
        if not isinstance(value, self.value_type):
            raise TypeError(
                f"expected {self.value_type.__name__}, got {type(value).__name__}"
            )
        return value.sql_value()

    def process_result_value(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            logger.debug("loaded NULL from %s column", self.value_type.__name__)
            return None
        return self.value_type.scan(value)


class DateType(_ChronalType):
    """Column type storing :class:`chronal.Date` as YYYY-MM-DD text."""

    value_type = Date
    cache_ok = True


class TimeOfDayType(_ChronalType):
    """Column type storing :class:`chronal.TimeOfDay` as SQL time text."""

    value_type = TimeOfDay
    cache_ok = True


class DateTimeType(_ChronalType):
    """Column type storing :class:`chronal.DateTime` as SQL timestamp text.

    Sub-second digits are not stored.
    """

    value_type = DateTime
    cache_ok = True


__all__ = [
    "DateType",
    "TimeOfDayType",
    "DateTimeType",
]
