"""Fan-out/fan-in task groups.

Architecture:
    - definitions.py: Per-job outcome and aggregate result structures
    - executors.py: FanOutExecutor (launch all, wait for all, apply policy)
    - telemetry.py: Structured logging

Usage:
    The page layer runs with ``FailurePolicy.ABORT_ON_FIRST``; each page's
    detail layer runs nested inside its page job with
    ``FailurePolicy.TOLERATE``.
"""

from __future__ import annotations

from .definitions import FanOutResult, JobOutcome
from .executors import FanOutExecutor

__all__ = [
    "FanOutExecutor",
    "FanOutResult",
    "JobOutcome",
]
