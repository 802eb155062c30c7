"""Interval samples derived from two usage snapshots.

CPU usage is a cumulative counter, so a sample reports how much of it was
consumed between the two snapshots. Memory usage is a gauge, so a sample
reports the later snapshot's value as is.
"""

from __future__ import annotations

import logging

from container_stats.core.errors import (
    IncompleteCpuStatsError,
    IncompleteMemoryStatsError,
    MissingSnapshotError,
    NonMonotonicCounterError,
    OutOfOrderSnapshotsError,
)
from container_stats.core.schemas import ContainerStats, StatsSample

logger = logging.getLogger(__name__)


def new_sample(earlier: ContainerStats | None, later: ContainerStats | None) -> StatsSample:
    """Build an interval sample from two snapshots of the same container.

    Args:
        earlier: Snapshot at the start of the interval
        later: Snapshot at the end of the interval

    Returns:
        StatsSample covering ``[earlier.timestamp, later.timestamp)``

    Raises:
        MissingSnapshotError: If either snapshot is None
        IncompleteCpuStatsError: If either snapshot has no CPU stats
        IncompleteMemoryStatsError: If either snapshot has no memory stats
        OutOfOrderSnapshotsError: If ``later`` is not strictly after ``earlier``
        NonMonotonicCounterError: If total CPU usage decreased
    """
    if earlier is None or later is None:
        raise MissingSnapshotError("both an earlier and a later snapshot are required")
    if earlier.cpu is None or later.cpu is None:
        raise IncompleteCpuStatsError("CPU stats missing from snapshot")
    if earlier.memory is None or later.memory is None:
        raise IncompleteMemoryStatsError("memory stats missing from snapshot")

    if later.timestamp <= earlier.timestamp:
        logger.debug(
            f"Rejecting sample: later={later.timestamp.isoformat()} "
            f"earlier={earlier.timestamp.isoformat()}"
        )
        raise OutOfOrderSnapshotsError(earlier.timestamp, later.timestamp)

    prev_total = earlier.cpu.usage.total
    cur_total = later.cpu.usage.total
    if cur_total < prev_total:
        logger.debug(f"Rejecting sample: CPU total went from {prev_total} to {cur_total}")
        raise NonMonotonicCounterError(prev_total, cur_total)

    return StatsSample(
        timestamp=later.timestamp,
        duration=later.timestamp - earlier.timestamp,
        cpu_usage=cur_total - prev_total,
        memory_usage=later.memory.usage,
    )
