"""Tests for DataFrame export."""

from datetime import UTC, datetime, timedelta

import pandas as pd
import pytest

from container_stats.core.schemas import (
    ContainerInfo,
    ContainerStats,
    CpuStats,
    CpuUsage,
    MemoryStats,
)
from container_stats.results.frames import (
    SAMPLE_COLUMNS,
    STATS_COLUMNS,
    samples_to_dataframe,
    stats_to_dataframe,
)
from container_stats.sampling.history import build_samples


@pytest.fixture
def info() -> ContainerInfo:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    return ContainerInfo(
        name="/some/container",
        stats=[
            ContainerStats(
                timestamp=start,
                cpu=CpuStats(usage=CpuUsage(per_cpu=[0, 0], total=0)),
                memory=MemoryStats(usage=100, working_set=80),
            ),
            ContainerStats(
                timestamp=start + timedelta(seconds=1),
                cpu=CpuStats(
                    usage=CpuUsage(
                        per_cpu=[250_000_000, 250_000_000],
                        total=500_000_000,
                        system=100_000_000,
                        user=400_000_000,
                    ),
                    load=3,
                ),
                memory=MemoryStats(usage=200, working_set=150),
            ),
        ],
    )


class TestSamplesToDataFrame:
    """Tests for samples_to_dataframe."""

    def test_columns_and_values(self, info: ContainerInfo) -> None:
        """Test one row per sample with derived CPU percent."""
        df = samples_to_dataframe(build_samples(info))

        assert list(df.columns) == SAMPLE_COLUMNS
        assert len(df) == 1
        row = df.iloc[0]
        assert row["cpu_usage_ns"] == 500_000_000
        assert row["cpu_percent"] == pytest.approx(50.0)
        assert row["memory_usage_bytes"] == 200
        assert row["memory_usage_mb"] == pytest.approx(200 / (1024 * 1024))
        assert row["timestamp"] == pd.Timestamp("2024-01-01T00:00:01Z")

    def test_empty(self) -> None:
        """Test no samples gives an empty frame with the expected columns."""
        df = samples_to_dataframe([])
        assert df.empty
        assert list(df.columns) == SAMPLE_COLUMNS


class TestStatsToDataFrame:
    """Tests for stats_to_dataframe."""

    def test_columns_and_values(self, info: ContainerInfo) -> None:
        """Test one row per snapshot in history order."""
        df = stats_to_dataframe(info)

        assert list(df.columns) == STATS_COLUMNS
        assert len(df) == 2
        assert list(df["cpu_total_ns"]) == [0, 500_000_000]
        assert list(df["num_cpus"]) == [2, 2]
        assert list(df["memory_working_set_bytes"]) == [80, 150]
        assert list(df["cpu_load"]) == [0, 3]
        assert df["memory_usage_mb"].iloc[1] == pytest.approx(200 / (1024 * 1024))
        assert (df["container"] == "/some/container").all()

    def test_missing_sections(self) -> None:
        """Test absent CPU or memory sections become missing values."""
        info = ContainerInfo(
            name="/partial",
            stats=[ContainerStats(timestamp=datetime(2024, 1, 1, tzinfo=UTC))],
        )
        df = stats_to_dataframe(info)
        assert df["cpu_total_ns"].isna().all()
        assert df["memory_usage_bytes"].isna().all()
        assert df["cpu_load"].isna().all()
        assert df["memory_usage_mb"].isna().all()
