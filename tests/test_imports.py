"""Tests for Chronal package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_chronal() -> None:
    """Import chronal package succeeds."""
    import chronal

    assert hasattr(chronal, "__version__")
    assert chronal.__version__ == "0.1.0"


def test_public_names() -> None:
    """Every name in chronal.__all__ resolves."""
    import chronal

    for name in chronal.__all__:
        assert hasattr(chronal, name), name


def test_import_core_module() -> None:
    """Import chronal.core submodule succeeds."""
    from chronal import core

    assert core.__all__ == ["Date", "DateTime", "TimeOfDay"]


def test_import_units_module() -> None:
    """Import chronal.units submodule succeeds."""
    from chronal import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import chronal.format submodule succeeds."""
    from chronal import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import chronal.convert submodule succeeds."""
    from chronal import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import chronal.arithmetic submodule succeeds."""
    from chronal import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import chronal._internal submodule succeeds."""
    from chronal import _internal

    assert hasattr(_internal, "__all__")


def test_import_sqltypes() -> None:
    """Import chronal.sqltypes succeeds."""
    from chronal import sqltypes

    assert sqltypes.__all__ == ["DateType", "TimeOfDayType", "DateTimeType"]


def test_import_errors() -> None:
    """Import chronal.errors succeeds with all exception classes."""
    from chronal.errors import (
        ChronalError,
        DecodeError,
        ParseError,
        ScanError,
        ValidationError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, ChronalError)
    assert issubclass(ParseError, ChronalError)
    assert issubclass(DecodeError, ChronalError)
    assert issubclass(ScanError, ChronalError)
    assert issubclass(ChronalError, Exception)

    # Interop with the builtin hierarchy
    assert issubclass(ValidationError, ValueError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(DecodeError, ValueError)
    assert issubclass(ScanError, TypeError)


def test_import_constants() -> None:
    """Import chronal._internal.constants succeeds."""
    from chronal._internal.constants import (
        INSTANT_EPOCH,
        MAX_YEAR,
        MIN_YEAR,
        MICROS_PER_DAY,
        SQL_TIME_FRACTION_DIGITS,
    )

    assert MICROS_PER_DAY == 86_400_000_000
    assert MIN_YEAR == 1
    assert MAX_YEAR == 9999
    assert INSTANT_EPOCH.isoformat() == "0001-01-01T00:00:00+00:00"
    assert SQL_TIME_FRACTION_DIGITS == 6


def test_constants_exports_resolve() -> None:
    """Every exported constant exists and unused ones are gone."""
    from chronal._internal import constants

    for name in constants.__all__:
        assert hasattr(constants, name), name
    assert not hasattr(constants, "MILLIS_PER_SECOND")


def test_library_logger_has_null_handler() -> None:
    """The package logger carries a NullHandler."""
    import logging

    import chronal  # noqa: F401

    handlers = logging.getLogger("chronal").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
