"""strftime-style formatting and parsing.

Arbitrary layouts use the standard library's strftime/strptime
directives (``%Y``, ``%m``, ``%d``, ``%H``, ``%M``, ``%S``, ``%f``,
``%z`` and so on). The canonical and SQL layouts have their own strict
codecs in :mod:`chronal.format.rfc3339` and :mod:`chronal.format.sql`;
this module is for everything else.

Functions:
    format_layout: Format an instant using a strftime layout.
    parse_layout: Parse a string using a strptime layout.

Examples:
    >>> import datetime
    >>> from chronal.format.layout import format_layout, parse_layout

    >>> parse_layout("%d/%m/%Y %H:%M", "15/01/2024 14:30")
    datetime.datetime(2024, 1, 15, 14, 30, tzinfo=datetime.timezone.utc)

    >>> format_layout(datetime.datetime(2024, 1, 15, 14, 30), "%Y/%m/%d %H:%M")
    '2024/01/15 14:30'
"""

from __future__ import annotations

import datetime as _datetime

from chronal._internal.constants import UTC
from chronal.errors import ParseError
from chronal.units.timezone import resolve_zone


def format_layout(value: _datetime.datetime, layout: str) -> str:
    """Format ``value`` using strftime directives.

    Directives are expanded by the platform's C library. Zero padding
    of ``%Y`` for years before 1000 is platform-dependent: glibc writes
    ``1`` for year 1 where other platforms write ``0001``. Use
    ``to_text()`` when four-digit years are required.

    Examples:
        >>> import datetime
        >>> format_layout(datetime.datetime(1, 2, 3), "%d.%m")
        '03.02'
    """
    return value.strftime(layout)


def parse_layout(
    layout: str,
    s: str,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Parse a string using strptime directives.

    Args:
        layout: Format string with %-directives.
        s: The string to parse.
        tz: Zone for the result. A layout without ``%z`` yields a wall
            clock reading in ``tz`` (UTC when omitted). A layout with
            ``%z`` keeps ``tz`` only if its offset matches the parsed one.

    Returns:
        An aware instant. Components the layout does not mention take
        strptime's defaults (1900-01-01 00:00:00).

    Raises:
        ParseError: If the string doesn't match the layout.

    Examples:
        >>> parse_layout("%Y-%m-%d %z", "2024-01-15 +0530").utcoffset()
        datetime.timedelta(seconds=19800)

        >>> parse_layout("%Y-%m-%d", "15.01.2024")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: string '15.01.2024' does not match layout '%Y-%m-%d'
    """
    try:
        parsed = _datetime.datetime.strptime(s, layout)
    except ValueError as err:
        raise ParseError(f"string {s!r} does not match layout {layout!r}") from err

    offset = parsed.utcoffset()
    if offset is None:
        return parsed.replace(tzinfo=tz if tz is not None else UTC)

    wall = parsed.replace(tzinfo=None)
    return wall.replace(tzinfo=resolve_zone(wall, offset, tz))


__all__ = ["format_layout", "parse_layout"]
