"""Pipeline driver: collect every page, then hand the rows to the sink.

The sink is called exactly once, and only after the whole collection has
succeeded. A page-level failure propagates with nothing written.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from time import perf_counter
from typing import Protocol

from laakhay.leaderboard.connectors.leetcode import LeetCodeRESTConnector
from laakhay.leaderboard.core import HarvestConfig
from laakhay.leaderboard.models import RankedUser
from laakhay.leaderboard.sinks import CSVSink

from .enrichment import DetailEnricher
from .orchestrator import PaginationOrchestrator
from .telemetry import log_harvest_aborted, log_harvest_complete


class RecordSink(Protocol):
    def write(self, users: Sequence[RankedUser]) -> int: ...


@dataclass(frozen=True)
class HarvestSummary:
    """What a successful run produced.

    Attributes:
        pages: Pages crawled
        rows: Rows handed to the sink
        enrichment_failures: Rows left with sentinel detail fields
        elapsed_ms: Wall time of collection plus writing
    """

    pages: int
    rows: int
    enrichment_failures: int
    elapsed_ms: float


class LeaderboardPipeline:
    """Wires the orchestrator to an output sink."""

    def __init__(
        self,
        orchestrator: PaginationOrchestrator,
        sink: RecordSink,
        page_count: int,
    ) -> None:
        self._orchestrator = orchestrator
        self._sink = sink
        self._page_count = page_count

    @classmethod
    def from_connector(
        cls,
        connector: LeetCodeRESTConnector,
        config: HarvestConfig,
        sink: RecordSink | None = None,
    ) -> LeaderboardPipeline:
        """Build the standard pipeline over a LeetCode connector."""
        enricher = DetailEnricher(connector.fetch_detail)
        orchestrator = PaginationOrchestrator(connector.fetch_page, enricher)
        return cls(
            orchestrator=orchestrator,
            sink=sink if sink is not None else CSVSink(config.output_path),
            page_count=config.page_count,
        )

    async def run(self) -> HarvestSummary:
        """Collect all pages and write them.

        Raises:
            Exception: The first page-level failure; the sink is not called
        """
        start = perf_counter()
        try:
            batches = await self._orchestrator.collect_pages(self._page_count)
        except Exception as e:
            log_harvest_aborted(error_type=type(e).__name__, error_message=str(e))
            raise

        users = [user for batch in batches for user in batch.users]
        rows = self._sink.write(users)
        summary = HarvestSummary(
            pages=len(batches),
            rows=rows,
            enrichment_failures=sum(len(batch.report.failures) for batch in batches),
            elapsed_ms=(perf_counter() - start) * 1000.0,
        )
        log_harvest_complete(
            pages=summary.pages,
            rows=summary.rows,
            enrichment_failures=summary.enrichment_failures,
            elapsed_ms=summary.elapsed_ms,
        )
        return summary


async def harvest(config: HarvestConfig, sink: RecordSink | None = None) -> HarvestSummary:
    """Run one full harvest against LeetCode with a connector scoped to the run."""
    async with LeetCodeRESTConnector(
        csrf_token=config.csrf_token, timeout=config.timeout
    ) as connector:
        pipeline = LeaderboardPipeline.from_connector(connector, config, sink=sink)
        return await pipeline.run()
