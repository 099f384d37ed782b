"""Fan-out result structures.

This module defines the per-job outcome and the aggregate result returned
by :class:`~.executors.FanOutExecutor` once every job has settled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K")
T = TypeVar("T")


@dataclass
class JobOutcome(Generic[K, T]):
    """Settled state of one fan-out job.

    Attributes:
        key: The key the job was launched for (page index, username, ...)
        value: Job return value, None if the job failed
        error: Exception raised by the job, None on success
        latency_ms: Wall time from job start to settle
    """

    key: K
    value: T | None = None
    error: Exception | None = None
    latency_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FanOutResult(Generic[K, T]):
    """All outcomes of one fan-out group, in submission order.

    Attributes:
        group_id: Label used in telemetry (e.g. "pages", "details:page=3")
        outcomes: One outcome per submitted key, same order as the keys
    """

    group_id: str
    outcomes: list[JobOutcome[K, T]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded

    @property
    def failures(self) -> list[JobOutcome[K, T]]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def values(self) -> list[T]:
        """Values of successful jobs, in submission order."""
        return [o.value for o in self.outcomes if o.ok]  # type: ignore[misc]

    def first_failure(self) -> JobOutcome[K, T] | None:
        """Earliest failed outcome in submission order."""
        for outcome in self.outcomes:
            if not outcome.ok:
                return outcome
        return None
