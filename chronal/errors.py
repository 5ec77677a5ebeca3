"""Chronal exception hierarchy.

All Chronal-specific exceptions inherit from ChronalError. The value
errors also inherit from the builtin ValueError so callers that only
know about the standard library can still catch them.
"""

from __future__ import annotations


class ChronalError(Exception):
    """Base exception for all Chronal errors."""

    pass


class ValidationError(ChronalError, ValueError):
    """Invalid input values.

    Raised when a component is out of range or an arithmetic result
    cannot be represented by the underlying instant.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Adding years past 9999
    """

    pass


class ParseError(ChronalError, ValueError):
    """Failed to parse a string representation.

    The message names the raw input and the expected layout. The
    originating standard library error, if any, is chained as
    ``__cause__``.

    Examples:
        - "2000-1-2" for the YYYY-MM-DD layout
        - JSON text missing its surrounding quotes
        - SQL time text with an RFC 3339 offset
    """

    pass


class DecodeError(ChronalError, ValueError):
    """Failed to decode a binary representation.

    Examples:
        - A packed date that is not exactly 4 bytes
        - A packed date whose fields do not form a calendar date
        - An instant encoding with an unknown version byte
    """

    pass


class ScanError(ChronalError, TypeError):
    """Unsupported runtime type handed to a SQL ``scan``."""

    pass


__all__ = [
    "ChronalError",
    "ValidationError",
    "ParseError",
    "DecodeError",
    "ScanError",
]
