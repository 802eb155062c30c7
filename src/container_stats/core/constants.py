"""Shared constants for container stats.

Centralized constants to avoid duplication and ensure consistency across modules.
"""

from __future__ import annotations

# Cumulative counters are unsigned 64-bit values as reported by the kernel.
# Wraparound at this width is not handled.
UINT64_MAX = 2**64 - 1

# CPU usage counters are reported in nanoseconds of CPU time.
NANOSECONDS_PER_SECOND = 1_000_000_000

# Percentages reported when no explicit list is requested.
DEFAULT_PERCENTAGES = [50, 80, 90, 95, 99]
