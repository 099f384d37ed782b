"""Core components."""

from .config import HarvestConfig
from .enums import FailurePolicy, MalformedField
from .exceptions import (
    DetailEnrichmentFailure,
    LeaderboardError,
    MalformedDataError,
    TransportError,
)

__all__ = [
    "HarvestConfig",
    "FailurePolicy",
    "MalformedField",
    "LeaderboardError",
    "TransportError",
    "MalformedDataError",
    "DetailEnrichmentFailure",
]
