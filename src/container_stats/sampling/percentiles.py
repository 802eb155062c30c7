"""Nearest-rank percentiles over non-negative integer measurements.

The value reported for percentage ``p`` over ``N`` values is the element at
zero-based rank ``floor(N * p / 100)`` of the values sorted ascending, with
the rank clamped to ``N - 1``. There is no interpolation: every result is
one of the input values.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from container_stats.core.schemas import Percentile, validate_percentages


def percentiles(values: Iterable[int], percentages: Sequence[int]) -> list[int]:
    """Compute nearest-rank percentiles.

    The input is copied before sorting and may be in any order. Results follow
    the order of ``percentages``, not ascending percentage.

    Args:
        values: Non-negative integer measurements
        percentages: Requested percentages, each within [0, 100]

    Returns:
        One value per requested percentage. All zeros if ``values`` is empty.

    Raises:
        ValueError: If a percentage is outside [0, 100]
    """
    validate_percentages(percentages)

    values_sorted = sorted(values)
    n = len(values_sorted)
    if n == 0:
        return [0 for _ in percentages]

    result = []
    for p in percentages:
        rank = min(n * p // 100, n - 1)
        result.append(values_sorted[rank])
    return result


def percentile_report(values: Iterable[int], percentages: Sequence[int]) -> list[Percentile]:
    """Like :func:`percentiles`, but pair each value with its percentage."""
    return [
        Percentile(percentage=p, value=v)
        for p, v in zip(percentages, percentiles(values, percentages), strict=True)
    ]
