"""Laakhay Leaderboard - LeetCode global ranking harvester."""

from .connectors import LeetCodeRESTConnector
from .core import (
    DetailEnrichmentFailure,
    FailurePolicy,
    HarvestConfig,
    LeaderboardError,
    MalformedDataError,
    MalformedField,
    TransportError,
)
from .models import SENTINEL_COUNT, SENTINEL_TEXT, RankedUser, UserDetail
from .pipeline import (
    DetailEnricher,
    HarvestSummary,
    LeaderboardPipeline,
    PaginationOrchestrator,
    harvest,
)
from .sinks import CSVSink

__version__ = "0.1.0"

__all__ = [
    "LeetCodeRESTConnector",
    "HarvestConfig",
    "FailurePolicy",
    "MalformedField",
    "LeaderboardError",
    "TransportError",
    "MalformedDataError",
    "DetailEnrichmentFailure",
    "RankedUser",
    "UserDetail",
    "SENTINEL_COUNT",
    "SENTINEL_TEXT",
    "DetailEnricher",
    "PaginationOrchestrator",
    "LeaderboardPipeline",
    "HarvestSummary",
    "harvest",
    "CSVSink",
]
