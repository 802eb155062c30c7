"""Tests for container stats schemas."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from container_stats.core.constants import UINT64_MAX
from container_stats.core.schemas import (
    ContainerInfo,
    ContainerStats,
    CpuStats,
    CpuUsage,
    MemoryStats,
    Percentile,
    StatsConfig,
    StatsSample,
)


class TestContainerStats:
    """Tests for raw snapshot schemas."""

    def test_sections_default_to_missing(self) -> None:
        """Test CPU and memory sections are absent unless collected."""
        stats = ContainerStats(timestamp=datetime.now(UTC))
        assert stats.cpu is None
        assert stats.memory is None

    def test_cpu_usage_defaults(self) -> None:
        """Test an empty CPU section has zero counters."""
        cpu = CpuStats()
        assert cpu.usage.total == 0
        assert cpu.usage.per_cpu == []

    def test_negative_counter_rejected(self) -> None:
        """Test counters must be non-negative."""
        with pytest.raises(ValidationError):
            CpuUsage(total=-1)
        with pytest.raises(ValidationError):
            MemoryStats(usage=-1)

    def test_counter_width(self) -> None:
        """Test counters are limited to 64 bits."""
        assert CpuUsage(total=UINT64_MAX).total == UINT64_MAX
        with pytest.raises(ValidationError):
            CpuUsage(total=UINT64_MAX + 1)
        with pytest.raises(ValidationError):
            CpuUsage(per_cpu=[1, -1])

    def test_naive_timestamp_assumed_utc(self) -> None:
        """Test timestamps without an offset are read as UTC."""
        stats = ContainerStats.model_validate({"timestamp": "2024-01-01T00:00:00"})
        assert stats.timestamp == datetime(2024, 1, 1, tzinfo=UTC)

    def test_aware_timestamp_kept(self) -> None:
        """Test timestamps with an offset keep it."""
        stats = ContainerStats.model_validate({"timestamp": "2024-01-01T02:00:00+02:00"})
        assert stats.timestamp.utcoffset() == timedelta(hours=2)
        assert stats.timestamp == datetime(2024, 1, 1, tzinfo=UTC)

    def test_from_dict(self) -> None:
        """Test snapshots validate from collector dictionaries."""
        stats = ContainerStats.model_validate(
            {
                "timestamp": "2024-01-01T00:00:00Z",
                "cpu": {"usage": {"per_cpu": [5, 5], "total": 10, "system": 2, "user": 8}},
                "memory": {"usage": 200},
            }
        )
        assert stats.cpu is not None
        assert stats.cpu.usage.total == 10
        assert stats.memory is not None
        assert stats.memory.usage == 200


class TestContainerInfo:
    """Tests for ContainerInfo schema."""

    def test_name_required(self) -> None:
        """Test a container must be named."""
        with pytest.raises(ValidationError):
            ContainerInfo(name="")

    def test_defaults(self) -> None:
        """Test empty history defaults."""
        info = ContainerInfo(name="/docker/abc")
        assert info.stats == []


class TestStatsSample:
    """Tests for StatsSample schema."""

    def test_zero_duration_cpu_percent(self) -> None:
        """Test CPU percent is zero when no time elapsed."""
        sample = StatsSample(
            timestamp=datetime.now(UTC),
            duration=timedelta(0),
            cpu_usage=100,
            memory_usage=0,
        )
        assert sample.cpu_percent == 0.0

    def test_negative_usage_rejected(self) -> None:
        """Test derived usage must be non-negative."""
        with pytest.raises(ValidationError):
            StatsSample(
                timestamp=datetime.now(UTC),
                duration=timedelta(seconds=1),
                cpu_usage=-5,
                memory_usage=0,
            )


class TestStatsConfig:
    """Tests for StatsConfig schema."""

    def test_defaults(self) -> None:
        """Test default percentages and policy."""
        config = StatsConfig()
        assert config.cpu_usage_percentiles == [50, 80, 90, 95, 99]
        assert config.memory_usage_percentiles == [50, 80, 90, 95, 99]
        assert config.num_stats is None
        assert config.skip_invalid_samples is False

    def test_defaults_not_shared(self) -> None:
        """Test default lists are independent per instance."""
        a = StatsConfig()
        b = StatsConfig()
        a.cpu_usage_percentiles.append(42)
        assert b.cpu_usage_percentiles == [50, 80, 90, 95, 99]

    def test_percentage_range(self) -> None:
        """Test percentages outside [0, 100] are rejected."""
        with pytest.raises(ValidationError, match=r"percentage 101 is outside \[0, 100\]"):
            StatsConfig(cpu_usage_percentiles=[50, 101])
        with pytest.raises(ValidationError):
            StatsConfig(memory_usage_percentiles=[-1])

    def test_num_stats_minimum(self) -> None:
        """Test at least two snapshots are needed to summarize."""
        with pytest.raises(ValidationError):
            StatsConfig(num_stats=1)


class TestPercentile:
    """Tests for Percentile schema."""

    def test_percentage_range(self) -> None:
        """Test percentage bounds."""
        assert Percentile(percentage=100, value=3).value == 3
        with pytest.raises(ValidationError):
            Percentile(percentage=101, value=3)
