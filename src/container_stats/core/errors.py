"""Error types for container stats."""

from __future__ import annotations

from datetime import datetime


class ContainerStatsError(Exception):
    """Base exception for all container stats errors."""

    pass


class SampleError(ContainerStatsError, ValueError):
    """Raised when two snapshots cannot be turned into an interval sample."""

    pass


class MissingSnapshotError(SampleError):
    """Raised when one or both snapshots are missing."""

    pass


class IncompleteCpuStatsError(SampleError):
    """Raised when a snapshot carries no CPU stats."""

    pass


class IncompleteMemoryStatsError(SampleError):
    """Raised when a snapshot carries no memory stats."""

    pass


class OutOfOrderSnapshotsError(SampleError):
    """Raised when the later snapshot is not strictly after the earlier one.

    Attributes:
        earlier: Timestamp of the snapshot passed as earlier.
        later: Timestamp of the snapshot passed as later.
    """

    def __init__(self, earlier: datetime, later: datetime):
        self.earlier = earlier
        self.later = later
        super().__init__(
            f"wrong stats order: later snapshot at {later.isoformat()} "
            f"is not after earlier snapshot at {earlier.isoformat()}"
        )


class NonMonotonicCounterError(SampleError):
    """Raised when a cumulative CPU counter decreases between snapshots.

    Attributes:
        previous: Counter value in the earlier snapshot.
        current: Counter value in the later snapshot.
    """

    def __init__(self, previous: int, current: int):
        self.previous = previous
        self.current = current
        super().__init__(
            f"current CPU usage ({current}) is less than previous CPU usage ({previous}); "
            "cumulative counter was reset or the input is corrupted"
        )


class EmptyHistoryError(ContainerStatsError, LookupError):
    """Raised when a history has too few snapshots for the requested operation."""

    pass
