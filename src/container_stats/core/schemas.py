"""Pydantic schemas for container stats.

This module defines the data contracts used throughout the package: raw
usage snapshots as handed over by a collector, the per-container history
that holds them, and the derived interval samples and percentile summaries.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, field_validator

from container_stats.core.constants import DEFAULT_PERCENTAGES, UINT64_MAX
from container_stats.core.errors import EmptyHistoryError
from container_stats.utils.rate_utils import (
    bytes_to_mb,
    compute_cpu_percent,
    nanoseconds_to_seconds,
)


def validate_percentages(values: Iterable[int]) -> None:
    """Raise ValueError if any percentage is outside [0, 100]."""
    for p in values:
        if not 0 <= p <= 100:
            raise ValueError(f"percentage {p} is outside [0, 100]")


# =============================================================================
# RAW SNAPSHOTS
# =============================================================================


class CpuUsage(BaseModel):
    """Cumulative CPU usage counters in nanoseconds."""

    per_cpu: list[int] = Field(default_factory=list, description="Per-core cumulative usage")
    total: int = Field(default=0, ge=0, le=UINT64_MAX, description="Total CPU time")
    system: int = Field(default=0, ge=0, le=UINT64_MAX, description="Time spent in kernel mode")
    user: int = Field(default=0, ge=0, le=UINT64_MAX, description="Time spent in user mode")

    @field_validator("per_cpu")
    @classmethod
    def validate_per_cpu(cls, v: list[int]) -> list[int]:
        """Per-core counters share the width and sign of the totals."""
        for usage in v:
            if not 0 <= usage <= UINT64_MAX:
                raise ValueError(f"per-core usage {usage} is outside [0, {UINT64_MAX}]")
        return v


class CpuStats(BaseModel):
    """CPU section of a snapshot."""

    usage: CpuUsage = Field(default_factory=CpuUsage)
    load: int = Field(default=0, ge=0, description="Load average reported by the collector")


class MemoryStats(BaseModel):
    """Memory section of a snapshot. Memory usage is a gauge, not a counter."""

    usage: int = Field(default=0, ge=0, le=UINT64_MAX, description="Current usage in bytes")
    working_set: int = Field(default=0, ge=0, le=UINT64_MAX, description="Working set in bytes")


class ContainerStats(BaseModel):
    """Raw resource usage of a container at one instant.

    Attributes:
        timestamp: When the snapshot was taken
        cpu: CPU counters, or None if not collected yet
        memory: Memory usage, or None if not collected yet
    """

    timestamp: datetime
    cpu: CpuStats | None = Field(default=None)
    memory: MemoryStats | None = Field(default=None)

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC so snapshots always compare."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ContainerInfo(BaseModel):
    """Monitoring history of a single container.

    ``stats`` is ordered by non-decreasing timestamp, oldest first. The order is
    produced by the collector and is not enforced here; accessors rely on it.
    """

    name: str = Field(..., min_length=1, description="Container identifier")
    stats: list[ContainerStats] = Field(default_factory=list)

    def stats_start_time(self) -> datetime:
        """Return the timestamp of the oldest snapshot.

        Raises:
            EmptyHistoryError: If the history holds no snapshots
        """
        if not self.stats:
            raise EmptyHistoryError(f"no stats recorded for container {self.name}")
        return self.stats[0].timestamp

    def stats_end_time(self) -> datetime:
        """Return the timestamp of the newest snapshot.

        Raises:
            EmptyHistoryError: If the history holds no snapshots
        """
        if not self.stats:
            raise EmptyHistoryError(f"no stats recorded for container {self.name}")
        return self.stats[-1].timestamp


# =============================================================================
# DERIVED STATISTICS
# =============================================================================


class StatsSample(BaseModel):
    """Usage over the interval between two snapshots.

    Values are copied out of the snapshots, so a sample holds no reference to
    the history it was built from.
    """

    model_config = {"frozen": True}

    timestamp: datetime = Field(..., description="Timestamp of the later snapshot")
    duration: timedelta = Field(..., description="Time elapsed between the two snapshots")
    cpu_usage: int = Field(ge=0, description="CPU time consumed in the interval (ns)")
    memory_usage: int = Field(ge=0, description="Memory usage at the end of the interval")

    @property
    def start_time(self) -> datetime:
        """Timestamp of the earlier snapshot."""
        return self.timestamp - self.duration

    @property
    def cpu_usage_seconds(self) -> float:
        return nanoseconds_to_seconds(self.cpu_usage)

    @property
    def cpu_percent(self) -> float:
        """Average CPU utilization over the interval (100 = one full core)."""
        return compute_cpu_percent(self.cpu_usage, self.duration.total_seconds())

    def to_flat_dict(self) -> dict[str, Any]:
        """Convert to flat dictionary for DataFrame creation."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "duration_seconds": self.duration.total_seconds(),
            "cpu_usage_ns": self.cpu_usage,
            "cpu_percent": self.cpu_percent,
            "memory_usage_bytes": self.memory_usage,
            "memory_usage_mb": bytes_to_mb(self.memory_usage),
        }


class Percentile(BaseModel):
    """A requested percentage paired with its value."""

    percentage: int = Field(ge=0, le=100)
    value: int = Field(ge=0)


class StatsPercentiles(BaseModel):
    """Distribution of CPU and memory usage over a history."""

    max_memory_usage: int = Field(default=0, ge=0, description="Peak memory usage in bytes")
    memory_usage_percentiles: list[Percentile] = Field(default_factory=list)
    cpu_usage_percentiles: list[Percentile] = Field(default_factory=list)


# =============================================================================
# CONFIGURATION
# =============================================================================


class StatsConfig(BaseModel):
    """Settings for summarizing a container history.

    This is the configuration loaded from YAML/JSON files.
    """

    cpu_usage_percentiles: list[int] = Field(
        default_factory=lambda: list(DEFAULT_PERCENTAGES),
        description="Percentages reported for per-interval CPU usage",
    )
    memory_usage_percentiles: list[int] = Field(
        default_factory=lambda: list(DEFAULT_PERCENTAGES),
        description="Percentages reported for memory usage",
    )
    num_stats: int | None = Field(
        default=None, ge=2, description="Only summarize the most recent N snapshots"
    )
    skip_invalid_samples: bool = Field(
        default=False, description="Skip snapshot pairs that cannot form a sample"
    )

    @field_validator("cpu_usage_percentiles", "memory_usage_percentiles")
    @classmethod
    def check_percentages(cls, v: list[int]) -> list[int]:
        """Ensure every percentage is within [0, 100]."""
        validate_percentages(v)
        return v
