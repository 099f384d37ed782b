"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any

from .enums import MalformedField


class LeaderboardError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(LeaderboardError):
    """Network, HTTP or decoding failure talking to the GraphQL endpoint.

    Always fatal to the task that issued the request.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MalformedDataError(LeaderboardError):
    """A required field is absent from an otherwise well-formed response.

    Signals an upstream contract break rather than a transient condition, so
    it is fatal to the enclosing page or detail task.
    """

    def __init__(
        self,
        message: str,
        field: MalformedField,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.context = context or {}


class DetailEnrichmentFailure(LeaderboardError):
    """Detail fetch for a single user failed.

    Built at the enrichment boundary from the underlying error and recorded;
    never raised out of the enrichment stage.
    """

    def __init__(self, username: str, cause: BaseException) -> None:
        super().__init__(f"detail enrichment failed for {username!r}: {cause}")
        self.username = username
        self.cause = cause
