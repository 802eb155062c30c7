"""Container stats - sampling and statistics over container usage histories."""

from __future__ import annotations

from container_stats.core.errors import (
    ContainerStatsError,
    EmptyHistoryError,
    SampleError,
)
from container_stats.core.schemas import (
    ContainerInfo,
    ContainerStats,
    CpuStats,
    CpuUsage,
    MemoryStats,
    StatsConfig,
    StatsPercentiles,
    StatsSample,
)
from container_stats.sampling import (
    build_samples,
    new_sample,
    percentiles,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "ContainerInfo",
    "ContainerStats",
    "ContainerStatsError",
    "CpuStats",
    "CpuUsage",
    "EmptyHistoryError",
    "MemoryStats",
    "SampleError",
    "StatsConfig",
    "StatsPercentiles",
    "StatsSample",
    "build_samples",
    "new_sample",
    "percentiles",
    "summarize",
    "__version__",
]
