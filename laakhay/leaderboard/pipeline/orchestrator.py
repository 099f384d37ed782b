"""Pagination orchestrator.

Fans out one job per ranking page. Each job fetches its page and then, only
if that succeeded, enriches the page's users inline. The orchestrator waits
for every page job before deciding anything:

- any failed page fetch aborts the whole collection with the error of the
  lowest failed page index, discarding every other page;
- otherwise pages are concatenated in ascending index order, each page in
  the order its users were returned.

Enrichment jobs of other pages are never cancelled when a page fails; they
run to completion and their results are dropped.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from time import perf_counter

from laakhay.leaderboard.core import FailurePolicy
from laakhay.leaderboard.models import RankedUser
from laakhay.leaderboard.runtime.fanout import FanOutExecutor

from .enrichment import DetailEnricher, EnrichmentReport
from .telemetry import log_page_completed

PageFetcher = Callable[[int], Awaitable[list[RankedUser]]]


@dataclass
class PageBatch:
    """Users of one page after enrichment."""

    page: int
    users: list[RankedUser] = field(default_factory=list)
    report: EnrichmentReport = field(default_factory=EnrichmentReport)


class PaginationOrchestrator:
    """Collects and enriches every page of the ranking."""

    def __init__(self, fetch_page: PageFetcher, enricher: DetailEnricher) -> None:
        self._fetch_page = fetch_page
        self._enricher = enricher

    async def collect_pages(self, page_count: int) -> list[PageBatch]:
        """Run every page job and return the page batches in page order.

        Args:
            page_count: Number of pages; pages 1..page_count are fetched

        Raises:
            ValueError: If page_count is not a positive int
            Exception: The page fetch error of the lowest failed page index
        """
        if isinstance(page_count, bool) or not isinstance(page_count, int) or page_count < 1:
            raise ValueError(f"page_count must be a positive int, got {page_count!r}")

        executor: FanOutExecutor[int, PageBatch] = FanOutExecutor(
            group_id="pages", policy=FailurePolicy.ABORT_ON_FIRST
        )
        result = await executor.execute(list(range(1, page_count + 1)), self._run_page)
        return result.values

    async def collect_all(self, page_count: int) -> list[RankedUser]:
        """Flat user sequence across pages 1..page_count, page order first."""
        batches = await self.collect_pages(page_count)
        return [user for batch in batches for user in batch.users]

    async def _run_page(self, page: int) -> PageBatch:
        start = perf_counter()
        users = await self._fetch_page(page)
        report = await self._enricher.enrich(users, page=page)
        log_page_completed(
            page=page,
            users=len(users),
            enrichment_failures=len(report.failures),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return PageBatch(page=page, users=users, report=report)
