"""Internal utilities for Chronal.

This module contains private implementation details:
    - Constants, reference points and wire layouts
    - Component validation
    - Calendar normalization for overflowing date addition

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronal._internal.calendar import days_in_month, normalize_date
from chronal._internal.validation import (
    validate_clock,
    validate_date,
    validate_day,
    validate_month,
    validate_tzinfo,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "normalize_date",
    "validate_clock",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_tzinfo",
    "validate_year",
]
