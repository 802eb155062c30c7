"""Utils module - Shared utilities."""

from __future__ import annotations

from container_stats.utils.logging import get_logger, setup_logging
from container_stats.utils.rate_utils import (
    bytes_to_mb,
    compute_cpu_percent,
    compute_rate,
    nanoseconds_to_seconds,
)

__all__ = [
    "bytes_to_mb",
    "compute_cpu_percent",
    "compute_rate",
    "get_logger",
    "nanoseconds_to_seconds",
    "setup_logging",
]
