"""Comparison and arithmetic operations for Chronal values.

This module provides explicit functions behind the methods of Date,
TimeOfDay and DateTime:
    - Comparisons: equal, after, before, between and their inclusive forms
    - Arithmetic: elapsed-time addition, calendar addition, rounding,
      truncation and clock shifting on standard library instants
"""

from __future__ import annotations

from chronal.arithmetic.comparisons import (
    after,
    after_or_equal,
    before,
    before_or_equal,
    between,
    between_or_equal,
    compare,
    equal,
)
from chronal.arithmetic.ops import (
    add_calendar,
    add_elapsed,
    clock_micros,
    round_delta,
    shift_clock,
    since_epoch,
    truncate_delta,
)

__all__: list[str] = [
    # Comparisons
    "equal",
    "after",
    "after_or_equal",
    "before",
    "before_or_equal",
    "between",
    "between_or_equal",
    "compare",
    # Arithmetic
    "add_elapsed",
    "add_calendar",
    "truncate_delta",
    "round_delta",
    "clock_micros",
    "shift_clock",
    "since_epoch",
]
