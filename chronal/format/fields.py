"""Field helpers shared by the layout codecs.

This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime

from chronal.errors import ParseError
from chronal.units.timezone import parse_offset, resolve_zone


def fraction_to_micros(fraction: str | None) -> int:
    """Convert the digits after the decimal point to microseconds.

    Digits past the sixth are dropped, the instant has no finer resolution.

    Examples:
        >>> fraction_to_micros("5")
        500000
        >>> fraction_to_micros("123456789")
        123456
    """
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def format_fraction(microsecond: int, digits: int = 6) -> str:
    """Format sub-second digits with trailing zeros trimmed.

    Returns an empty string for a zero fraction, otherwise the digits
    including the leading decimal point.

    Examples:
        >>> format_fraction(0)
        ''
        >>> format_fraction(120000)
        '.12'
    """
    if digits <= 0:
        return ""
    text = f"{microsecond:06d}"[:digits].rstrip("0")
    return f".{text}" if text else ""


def assemble(
    source: str,
    layout: str,
    *,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    fraction: str | None = None,
    offset: str | None = None,
    tz: _datetime.tzinfo | None = None,
) -> _datetime.datetime:
    """Build an aware instant from matched layout fields.

    Args:
        source: The raw input, used in error messages.
        layout: The expected layout, used in error messages.
        year, month, day, hour, minute, second: Parsed components.
        fraction: Digits after the decimal point, if present.
        offset: The parsed offset text; None means UTC.
        tz: Zone to prefer when its offset matches.

    Raises:
        ParseError: If a component is out of range.
    """
    try:
        wall = _datetime.datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            fraction_to_micros(fraction),
        )
    except ValueError as err:
        raise ParseError(f"invalid {layout} value {source!r}: {err}") from err

    delta = parse_offset(offset) if offset is not None else _datetime.timedelta(0)
    return wall.replace(tzinfo=resolve_zone(wall, delta, tz))


def text_of(data: str | bytes | bytearray | memoryview, layout: str) -> str:
    """Return ``data`` as text, decoding bytes-like input as ASCII.

    Raises:
        ParseError: If the bytes are not ASCII.
        TypeError: If ``data`` is neither text nor bytes-like.
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    raw = bytes(data)
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as err:
        raise ParseError(f"invalid {layout} value {raw!r}: not ASCII") from err


__all__ = [
    "fraction_to_micros",
    "format_fraction",
    "assemble",
    "text_of",
]
