"""Structured logging for fan-out groups.

Events are emitted with a short snake_case message and the payload in
``extra`` so that structured log handlers can index them.
"""

from __future__ import annotations

import logging
from typing import Any

from .definitions import FanOutResult

logger = logging.getLogger(__name__)


def log_job_error(
    *,
    group_id: str,
    key: Any,
    error_type: str,
    error_message: str,
    tolerated: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a failed job.

    Args:
        group_id: Fan-out group label
        key: Key the job was launched for
        error_type: Exception class name
        error_message: Exception message
        tolerated: Whether the group policy tolerates the failure
        latency_ms: Time from job start until it failed
    """
    logger.log(
        logging.DEBUG if tolerated else logging.ERROR,
        "fanout_job_error",
        extra={
            "group_id": group_id,
            "key": key,
            "error_type": error_type,
            "error_message": error_message,
            "tolerated": tolerated,
            "latency_ms": latency_ms,
        },
    )


def log_fanout_complete(
    *,
    result: FanOutResult[Any, Any],
    total_latency_ms: float | None = None,
) -> None:
    """Log settlement of a whole fan-out group.

    Args:
        result: Settled group result
        total_latency_ms: Time from launch until the last job settled
    """
    logger.debug(
        "fanout_complete",
        extra={
            "group_id": result.group_id,
            "jobs": len(result.outcomes),
            "succeeded": result.succeeded,
            "failed": result.failed,
            "total_latency_ms": total_latency_ms,
        },
    )
