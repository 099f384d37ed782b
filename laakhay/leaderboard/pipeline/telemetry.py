"""Structured logging for the harvest pipeline."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_completed(
    *,
    page: int,
    users: int,
    enrichment_failures: int,
    latency_ms: float | None = None,
) -> None:
    """Log a page whose fetch and detail enrichment both settled.

    Args:
        page: 1-based page index
        users: Target-region users kept from the page
        enrichment_failures: Users on the page left with sentinel detail
        latency_ms: Fetch plus enrichment time in milliseconds
    """
    logger.info(
        "page_completed",
        extra={
            "page": page,
            "users": users,
            "enrichment_failures": enrichment_failures,
            "latency_ms": latency_ms,
        },
    )


def log_detail_enrichment_failed(
    *,
    page: int | None,
    username: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a tolerated detail fetch failure."""
    logger.warning(
        "detail_enrichment_failed",
        extra={
            "page": page,
            "username": username,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_harvest_complete(
    *,
    pages: int,
    rows: int,
    enrichment_failures: int,
    elapsed_ms: float,
) -> None:
    logger.info(
        "harvest_complete",
        extra={
            "pages": pages,
            "rows": rows,
            "enrichment_failures": enrichment_failures,
            "elapsed_ms": elapsed_ms,
        },
    )


def log_harvest_aborted(*, error_type: str, error_message: str) -> None:
    logger.error(
        "harvest_aborted",
        extra={"error_type": error_type, "error_message": error_message},
    )
