"""Tabular views of samples and snapshot histories."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pandas as pd

from container_stats.core.schemas import ContainerInfo, ContainerStats, StatsSample
from container_stats.utils.rate_utils import bytes_to_mb

SAMPLE_COLUMNS = [
    "timestamp",
    "duration_seconds",
    "cpu_usage_ns",
    "cpu_percent",
    "memory_usage_bytes",
    "memory_usage_mb",
]

STATS_COLUMNS = [
    "container",
    "timestamp",
    "cpu_total_ns",
    "cpu_system_ns",
    "cpu_user_ns",
    "num_cpus",
    "cpu_load",
    "memory_usage_bytes",
    "memory_usage_mb",
    "memory_working_set_bytes",
]


def samples_to_dataframe(samples: Iterable[StatsSample]) -> pd.DataFrame:
    """Convert interval samples to a DataFrame with one row per sample."""
    rows = [s.to_flat_dict() for s in samples]
    df = pd.DataFrame(rows, columns=SAMPLE_COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"], format="ISO8601")
    return df


def _flatten_stats(container: str, stats: ContainerStats) -> dict[str, Any]:
    # Missing sections become None so they show up as NaN rather than zero usage
    cpu = stats.cpu.usage if stats.cpu is not None else None
    load = stats.cpu.load if stats.cpu is not None else None
    memory = stats.memory
    return {
        "container": container,
        "timestamp": stats.timestamp,
        "cpu_total_ns": cpu.total if cpu else None,
        "cpu_system_ns": cpu.system if cpu else None,
        "cpu_user_ns": cpu.user if cpu else None,
        "num_cpus": len(cpu.per_cpu) if cpu else None,
        "cpu_load": load,
        "memory_usage_bytes": memory.usage if memory else None,
        "memory_usage_mb": bytes_to_mb(memory.usage) if memory else None,
        "memory_working_set_bytes": memory.working_set if memory else None,
    }


def stats_to_dataframe(info: ContainerInfo) -> pd.DataFrame:
    """Convert a container history to a DataFrame with one row per snapshot.

    Row order follows the history; nothing is re-sorted.
    """
    rows = [_flatten_stats(info.name, s) for s in info.stats]
    return pd.DataFrame(rows, columns=STATS_COLUMNS)
