"""Core module - schemas, errors and configuration."""

from __future__ import annotations

from container_stats.core.config import load_config
from container_stats.core.constants import (
    DEFAULT_PERCENTAGES,
    NANOSECONDS_PER_SECOND,
    UINT64_MAX,
)
from container_stats.core.errors import (
    ContainerStatsError,
    EmptyHistoryError,
    IncompleteCpuStatsError,
    IncompleteMemoryStatsError,
    MissingSnapshotError,
    NonMonotonicCounterError,
    OutOfOrderSnapshotsError,
    SampleError,
)
from container_stats.core.schemas import (
    ContainerInfo,
    ContainerStats,
    CpuStats,
    CpuUsage,
    MemoryStats,
    Percentile,
    StatsConfig,
    StatsPercentiles,
    StatsSample,
)

__all__ = [
    "DEFAULT_PERCENTAGES",
    "NANOSECONDS_PER_SECOND",
    "UINT64_MAX",
    "ContainerInfo",
    "ContainerStats",
    "ContainerStatsError",
    "CpuStats",
    "CpuUsage",
    "EmptyHistoryError",
    "IncompleteCpuStatsError",
    "IncompleteMemoryStatsError",
    "load_config",
    "MemoryStats",
    "MissingSnapshotError",
    "NonMonotonicCounterError",
    "OutOfOrderSnapshotsError",
    "Percentile",
    "SampleError",
    "StatsConfig",
    "StatsPercentiles",
    "StatsSample",
]
