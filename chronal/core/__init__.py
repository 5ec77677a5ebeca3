"""Core value types.

This module provides the three value types:
    - Date: Calendar date, clock pinned to midnight UTC
    - TimeOfDay: Clock reading in a zone, date pinned to 0001-01-01
    - DateTime: Aware instant with full fidelity
"""

from __future__ import annotations

from chronal.core.date import Date
from chronal.core.datetime import DateTime
from chronal.core.time import TimeOfDay

__all__: list[str] = [
    "Date",
    "DateTime",
    "TimeOfDay",
]
