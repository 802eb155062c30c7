"""Shared rate utilities for interval statistics.

This module provides the unit conversions and per-second derivations used
by interval samples and by tabular export.

Functions:
    nanoseconds_to_seconds: Convert a CPU time counter delta to seconds
    bytes_to_mb: Convert bytes to megabytes
    compute_rate: Calculate a per-second rate from a delta and duration
    compute_cpu_percent: Calculate CPU utilization from CPU time and duration
"""

from __future__ import annotations

from container_stats.core.constants import NANOSECONDS_PER_SECOND


def nanoseconds_to_seconds(ns: int | float) -> float:
    """Convert nanoseconds to seconds.

    Args:
        ns: Number of nanoseconds

    Returns:
        Seconds (float)
    """
    return ns / NANOSECONDS_PER_SECOND


def bytes_to_mb(byte_count: int | float) -> float:
    """Convert bytes to megabytes.

    Args:
        byte_count: Number of bytes

    Returns:
        Megabytes (float)
    """
    return byte_count / (1024 * 1024)


def compute_rate(delta: int | float, duration_seconds: float) -> float:
    """Compute a per-second rate from a counter delta and duration.

    Args:
        delta: Counter increase over the window
        duration_seconds: Duration of the window in seconds

    Returns:
        Rate per second, 0.0 if duration is zero
    """
    if duration_seconds <= 0:
        return 0.0
    return delta / duration_seconds


def compute_cpu_percent(cpu_delta_ns: int, duration_seconds: float) -> float:
    """Compute CPU utilization percent from CPU time consumed over a window.

    100.0 means one core fully busy for the whole window; a container using
    several cores can exceed 100.

    Args:
        cpu_delta_ns: CPU time consumed in the window (nanoseconds)
        duration_seconds: Wall-clock duration of the window in seconds

    Returns:
        CPU percent, 0.0 if duration is zero
    """
    return compute_rate(nanoseconds_to_seconds(cpu_delta_ns), duration_seconds) * 100
