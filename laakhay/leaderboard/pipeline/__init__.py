"""Harvest pipeline: page fan-out, nested detail fan-out, output.

Architecture:
    - enrichment.py: DetailEnricher (per-page detail fan-out, failures tolerated)
    - orchestrator.py: PaginationOrchestrator (page fan-out, first failure fatal)
    - driver.py: LeaderboardPipeline and ``harvest`` (collect, then write once)
    - telemetry.py: Structured logging
"""

from .driver import HarvestSummary, LeaderboardPipeline, RecordSink, harvest
from .enrichment import DetailEnricher, EnrichmentReport
from .orchestrator import PageBatch, PaginationOrchestrator

__all__ = [
    "DetailEnricher",
    "EnrichmentReport",
    "PageBatch",
    "PaginationOrchestrator",
    "LeaderboardPipeline",
    "HarvestSummary",
    "RecordSink",
    "harvest",
]
