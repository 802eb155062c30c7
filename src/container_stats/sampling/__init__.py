"""Sampling module - interval samples, percentiles and history accessors."""

from __future__ import annotations

from container_stats.sampling.history import (
    build_samples,
    latest_sample,
    stats_end_time,
    stats_start_time,
    summarize,
)
from container_stats.sampling.percentiles import percentile_report, percentiles
from container_stats.sampling.sample import new_sample

__all__ = [
    "build_samples",
    "latest_sample",
    "new_sample",
    "percentile_report",
    "percentiles",
    "stats_end_time",
    "stats_start_time",
    "summarize",
]
