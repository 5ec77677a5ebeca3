"""JSON serialization and deserialization for Chronal values.

Every value type encodes to a JSON string holding its canonical text:

    Date        "2024-01-15"
    TimeOfDay   "14:30:45+05:30"
    DateTime    "2024-01-15T14:30:45.5Z"

Functions:
    encode_json_text: Quote canonical text as a JSON string.
    decode_json_text: Unquote a JSON string document.
    to_json: Convert any Chronal value to JSON text.
    from_json: Create a Chronal value of a named type from JSON text.

Classes:
    JSONEncoder: ``json.JSONEncoder`` that serializes Chronal values
        nested inside larger documents.

Examples:
    >>> import json
    >>> from chronal import Date
    >>> from chronal.convert.json import JSONEncoder, from_json, to_json

    >>> to_json(Date(2024, 1, 15))
    '"2024-01-15"'

    >>> from_json("Date", '"2024-01-15"')
    Date(2024, 1, 15)

    >>> json.dumps({"due": Date(2024, 1, 15)}, cls=JSONEncoder)
    '{"due": "2024-01-15"}'
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Union

from chronal.errors import ParseError

if TYPE_CHECKING:
    from chronal.core.date import Date
    from chronal.core.datetime import DateTime
    from chronal.core.time import TimeOfDay

# Type alias for Chronal values
ChronalType = Union["Date", "TimeOfDay", "DateTime"]


def _value_types() -> dict[str, type]:
    # Import here to avoid circular imports
    from chronal.core.date import Date
    from chronal.core.datetime import DateTime
    from chronal.core.time import TimeOfDay

    return {"Date": Date, "TimeOfDay": TimeOfDay, "DateTime": DateTime}


def encode_json_text(text: str) -> str:
    """Quote canonical text as a JSON string.

    Examples:
        >>> encode_json_text("2024-01-15")
        '"2024-01-15"'
    """
    return json.dumps(text)


def decode_json_text(data: str | bytes | bytearray) -> str:
    """Return the string held by a JSON string document.

    Args:
        data: The JSON document, as text or UTF-8 bytes.

    Returns:
        The unquoted string.

    Raises:
        ParseError: If ``data`` is not exactly a quoted string. A bare,
            unquoted date is rejected, and so are whitespace around the
            quotes and escape sequences inside them.

    Examples:
        >>> decode_json_text('"2024-01-15"')
        '2024-01-15'

        >>> decode_json_text('2024-01-15')  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: expected a JSON string, got '2024-01-15'
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError as err:
            raise ParseError(f"expected a JSON string, got {data!r}") from err
    else:
        text = data
    # Canonical text never needs escaping.
    if len(text) < 2 or text[0] != '"' or text[-1] != '"' or "\\" in text:
        raise ParseError(f"expected a JSON string, got {data!r}")
    try:
        value = json.loads(text)
    except ValueError as err:
        raise ParseError(f"expected a JSON string, got {data!r}") from err
    if not isinstance(value, str):
        raise ParseError(f"expected a JSON string, got {data!r}")
    return value


class JSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Chronal values as their canonical text.

    Examples:
        >>> import json
        >>> from chronal import TimeOfDay
        >>> json.dumps([TimeOfDay(3, 4, 5)], cls=JSONEncoder)
        '["03:04:05Z"]'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, tuple(_value_types().values())):
            return o.to_text()
        return super().default(o)


def to_json(value: ChronalType) -> str:
    """Convert a Chronal value to JSON text.

    Raises:
        TypeError: If value is not a Chronal value.
    """
    types = _value_types()
    if type(value) not in types.values():
        raise TypeError(
            f"expected Date, TimeOfDay, or DateTime, got {type(value).__name__}"
        )
    return value.to_json()


def from_json(kind: str | type, data: str | bytes | bytearray) -> ChronalType:
    """Create a Chronal value from JSON text.

    Args:
        kind: The value type, or its name ("Date", "TimeOfDay",
            "DateTime").
        data: The JSON document.

    Raises:
        ParseError: If the document is not the canonical text of ``kind``.
        TypeError: If ``kind`` is not a Chronal value type.

    Examples:
        >>> from_json("TimeOfDay", '"03:04:05Z"')
        TimeOfDay(3, 4, 5, nanosecond=0, tz=datetime.timezone.utc)
    """
    types = _value_types()
    cls = types.get(kind) if isinstance(kind, str) else kind
    if cls not in types.values():
        raise TypeError(f"unknown Chronal type: {kind!r}")
    return cls.from_json(data)


__all__ = [
    "JSONEncoder",
    "encode_json_text",
    "decode_json_text",
    "to_json",
    "from_json",
]
