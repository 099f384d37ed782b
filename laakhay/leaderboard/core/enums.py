"""Core enumerations shared across the connector and the pipeline.

Key Types:
    - MalformedField: Which required field was absent from an upstream response
    - FailurePolicy: How a fan-out group treats failed jobs
"""

from enum import Enum


class MalformedField(str, Enum):
    """Required field missing from an otherwise well-formed response.

    One variant per presence check performed by the response adapters, so
    callers can branch on what broke without parsing messages.
    """

    ENVELOPE = "envelope"  # data.<root> object absent (GraphQL errors, schema change)
    SCHEMA = "schema"  # present but of the wrong shape or type
    REGION = "region"
    RANK = "rank"
    USERNAME = "username"
    PROFILE = "profile"
    DIFFICULTY = "difficulty"
    SOLVED_COUNT = "solved_count"
    SOLVED_ALL = "solved_all"


class FailurePolicy(str, Enum):
    """Failure handling for a fan-out group once every job has settled."""

    ABORT_ON_FIRST = "abort_on_first"  # re-raise the first failure in submission order
    TOLERATE = "tolerate"  # report failures, never raise
