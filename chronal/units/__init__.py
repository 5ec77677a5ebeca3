"""Zone helpers.

This module provides:
    - UTC: the UTC tzinfo singleton
    - fixed_offset: build a fixed-offset tzinfo
    - minute_zone: the fixed zone a TimeOfDay carries for an offset
    - local_zone: the local zone at the current moment
    - format_offset / parse_offset: UTC offset text codecs
"""

from __future__ import annotations

from chronal.units.timezone import (
    UTC,
    fixed_offset,
    format_offset,
    in_zone,
    local_zone,
    minute_zone,
    parse_offset,
    resolve_zone,
    utc_offset,
    zone_for_offset,
    zone_of,
)

__all__: list[str] = [
    "UTC",
    "fixed_offset",
    "format_offset",
    "in_zone",
    "local_zone",
    "minute_zone",
    "parse_offset",
    "resolve_zone",
    "utc_offset",
    "zone_for_offset",
    "zone_of",
]
