"""Results module - tabular views for analysis."""

from __future__ import annotations

from container_stats.results.frames import samples_to_dataframe, stats_to_dataframe

__all__ = ["samples_to_dataframe", "stats_to_dataframe"]
