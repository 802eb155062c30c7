"""Accessors and summaries over a container's snapshot history.

Histories are consumed as given: snapshots are assumed to be ordered oldest
first, and nothing here re-sorts them.
"""

from __future__ import annotations

import logging
from datetime import datetime

from container_stats.core.errors import EmptyHistoryError, SampleError
from container_stats.core.schemas import (
    ContainerInfo,
    ContainerStats,
    StatsConfig,
    StatsPercentiles,
    StatsSample,
)
from container_stats.sampling.percentiles import percentile_report
from container_stats.sampling.sample import new_sample

logger = logging.getLogger(__name__)


def stats_start_time(info: ContainerInfo) -> datetime:
    """Return the timestamp of the oldest snapshot in ``info``.

    Raises:
        EmptyHistoryError: If the history holds no snapshots
    """
    return info.stats_start_time()


def stats_end_time(info: ContainerInfo) -> datetime:
    """Return the timestamp of the newest snapshot in ``info``.

    Raises:
        EmptyHistoryError: If the history holds no snapshots
    """
    return info.stats_end_time()


def _pairwise_samples(
    stats: list[ContainerStats], container: str, skip_invalid: bool
) -> list[StatsSample]:
    samples: list[StatsSample] = []
    for i in range(1, len(stats)):
        try:
            samples.append(new_sample(stats[i - 1], stats[i]))
        except SampleError as e:
            if not skip_invalid:
                raise
            logger.warning(f"Skipping snapshots {i - 1}-{i} of {container}: {e}")
    return samples


def build_samples(info: ContainerInfo, *, skip_invalid: bool = False) -> list[StatsSample]:
    """Build a sample from every consecutive pair of snapshots.

    Args:
        info: Container history
        skip_invalid: Log and skip pairs that cannot form a sample instead of
            raising

    Returns:
        Samples in history order, one fewer than the number of snapshots
        unless pairs were skipped

    Raises:
        SampleError: The first pair that cannot form a sample, unless
            ``skip_invalid`` is set
    """
    return _pairwise_samples(info.stats, info.name, skip_invalid)


def latest_sample(info: ContainerInfo) -> StatsSample:
    """Build a sample from the two most recent snapshots.

    Raises:
        EmptyHistoryError: If fewer than two snapshots are recorded
        SampleError: If the two snapshots cannot form a sample
    """
    if len(info.stats) < 2:
        raise EmptyHistoryError(
            f"need at least 2 stats to build a sample for container {info.name}, "
            f"have {len(info.stats)}"
        )
    return new_sample(info.stats[-2], info.stats[-1])


def summarize(info: ContainerInfo, config: StatsConfig | None = None) -> StatsPercentiles:
    """Summarize the CPU and memory usage distribution of a history.

    CPU percentiles are taken over the per-interval CPU usage of consecutive
    snapshot pairs. Memory percentiles and the peak are taken over every
    snapshot that carries memory stats.

    Args:
        info: Container history
        config: Percentages to report and sampling policy. Defaults apply if None.

    Returns:
        StatsPercentiles; values are zero when the history has no usable data
    """
    if config is None:
        config = StatsConfig()

    stats = info.stats
    if config.num_stats is not None:
        stats = stats[-config.num_stats :]

    samples = _pairwise_samples(stats, info.name, config.skip_invalid_samples)
    cpu_values = [s.cpu_usage for s in samples]
    memory_values = [s.memory.usage for s in stats if s.memory is not None]

    logger.debug(
        f"Summarizing {info.name}: {len(stats)} stats, {len(samples)} samples, "
        f"{len(memory_values)} memory readings"
    )

    return StatsPercentiles(
        max_memory_usage=max(memory_values) if memory_values else 0,
        memory_usage_percentiles=percentile_report(
            memory_values, config.memory_usage_percentiles
        ),
        cpu_usage_percentiles=percentile_report(cpu_values, config.cpu_usage_percentiles),
    )
