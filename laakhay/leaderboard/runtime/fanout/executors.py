"""Fan-out execution: launch one job per key, wait for all, collect outcomes.

``FanOutExecutor`` is the task-group abstraction used at both layers of the
harvest. Every job runs to completion; nothing is cancelled when a sibling
fails. The failure policy is applied only after the barrier.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter
from typing import Generic, TypeVar

from ...core.enums import FailurePolicy
from .definitions import FanOutResult, JobOutcome
from .telemetry import log_fanout_complete, log_job_error

K = TypeVar("K")
T = TypeVar("T")


class FanOutExecutor(Generic[K, T]):
    """Runs a job per key concurrently and settles them all.

    With ``FailurePolicy.ABORT_ON_FIRST`` the error of the earliest failed key
    (in submission order) is re-raised after every job has settled, and all
    results are discarded. With ``FailurePolicy.TOLERATE`` failures are
    reported in the returned :class:`FanOutResult` and never raised.
    """

    def __init__(self, group_id: str, policy: FailurePolicy) -> None:
        """Initialize fan-out executor.

        Args:
            group_id: Label used in telemetry
            policy: What to do with failed jobs once all have settled
        """
        self._group_id = group_id
        self._policy = policy

    async def execute(
        self,
        keys: Sequence[K],
        job: Callable[[K], Awaitable[T]],
    ) -> FanOutResult[K, T]:
        """Launch ``job(key)`` for every key and wait for all of them.

        Args:
            keys: Job keys; outcomes are returned in this order
            job: Async function run once per key

        Returns:
            FanOutResult with one outcome per key

        Raises:
            Exception: Under ABORT_ON_FIRST, the first failed job's error
        """
        start = perf_counter()
        outcomes = await asyncio.gather(*(self._settle(key, job) for key in keys))
        result: FanOutResult[K, T] = FanOutResult(group_id=self._group_id, outcomes=list(outcomes))

        tolerated = self._policy == FailurePolicy.TOLERATE
        for failure in result.failures:
            log_job_error(
                group_id=self._group_id,
                key=failure.key,
                error_type=type(failure.error).__name__,
                error_message=str(failure.error),
                tolerated=tolerated,
                latency_ms=failure.latency_ms,
            )
        log_fanout_complete(result=result, total_latency_ms=(perf_counter() - start) * 1000.0)

        if not tolerated:
            first = result.first_failure()
            if first is not None and first.error is not None:
                raise first.error
        return result

    async def _settle(self, key: K, job: Callable[[K], Awaitable[T]]) -> JobOutcome[K, T]:
        # Only Exception is captured; cancellation and interrupts propagate
        job_start = perf_counter()
        try:
            value = await job(key)
        except Exception as e:
            return JobOutcome(key=key, error=e, latency_ms=(perf_counter() - job_start) * 1000.0)
        return JobOutcome(key=key, value=value, latency_ms=(perf_counter() - job_start) * 1000.0)
