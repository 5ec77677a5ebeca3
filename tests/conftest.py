"""Pytest configuration and fixtures for Chronal tests."""

from __future__ import annotations

import datetime
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronal.units.timezone import fixed_offset  # noqa: E402


@pytest.fixture
def plus_0530() -> datetime.tzinfo:
    """A fixed +05:30 zone."""
    return fixed_offset(5, 30)


@pytest.fixture
def minus_0700() -> datetime.tzinfo:
    """A fixed -07:00 zone."""
    return fixed_offset(-7)


@pytest.fixture
def local_tz_utc(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the process local zone to UTC for the duration of a test."""
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def paris() -> datetime.tzinfo:
    """The Europe/Paris zone, skipping when no tz database is installed."""
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

    try:
        return ZoneInfo("Europe/Paris")
    except ZoneInfoNotFoundError:
        pytest.skip("IANA tz database is not available")
