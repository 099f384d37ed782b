"""Detail enrichment stage.

Runs one detail fetch per user of a page, concurrently, and writes each
result into its user in place. Failures stay with the user they belong to:
the user keeps its sentinel detail fields and siblings are unaffected.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

from laakhay.leaderboard.core import DetailEnrichmentFailure, FailurePolicy
from laakhay.leaderboard.models import RankedUser, UserDetail
from laakhay.leaderboard.runtime.fanout import FanOutExecutor

from .telemetry import log_detail_enrichment_failed

DetailFetcher = Callable[[str], Awaitable[UserDetail]]


@dataclass
class EnrichmentReport:
    """Outcome of enriching one batch of users.

    Attributes:
        attempted: Number of detail fetches launched
        failures: One entry per user left at sentinel values
    """

    attempted: int = 0
    failures: list[DetailEnrichmentFailure] = field(default_factory=list)

    @property
    def enriched(self) -> int:
        return self.attempted - len(self.failures)


class DetailEnricher:
    """Enriches a batch of users with profile detail."""

    def __init__(self, fetch_detail: DetailFetcher) -> None:
        self._fetch_detail = fetch_detail

    async def enrich(
        self, users: Sequence[RankedUser], *, page: int | None = None
    ) -> EnrichmentReport:
        """Fetch and apply detail for every user; never raises for a failed fetch.

        Returns once every fetch has settled.

        Args:
            users: Users to enrich in place; each job touches exactly one user
            page: Page the users came from, for telemetry

        Returns:
            EnrichmentReport listing the users left at sentinel values
        """
        executor: FanOutExecutor[RankedUser, None] = FanOutExecutor(
            group_id=f"details:page={page}", policy=FailurePolicy.TOLERATE
        )
        result = await executor.execute(users, self._enrich_one)

        report = EnrichmentReport(attempted=len(users))
        for outcome in result.failures:
            failure = DetailEnrichmentFailure(outcome.key.username, outcome.error)
            log_detail_enrichment_failed(
                page=page,
                username=failure.username,
                error_type=type(outcome.error).__name__,
                error_message=str(outcome.error),
            )
            report.failures.append(failure)
        return report

    async def _enrich_one(self, user: RankedUser) -> None:
        detail = await self._fetch_detail(user.username)
        user.apply_detail(detail)
