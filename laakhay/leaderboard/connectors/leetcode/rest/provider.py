"""LeetCode REST connector.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests over a shared RESTTransport.
    ``fetch_page`` and ``fetch_detail`` are the two calls the harvest
    pipeline fans out.
"""

from __future__ import annotations

from typing import Any

from laakhay.leaderboard.connectors.leetcode.config import BASE_URL, auth_headers
from laakhay.leaderboard.models import RankedUser, UserDetail
from laakhay.leaderboard.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class LeetCodeRESTConnector:
    """LeetCode GraphQL connector for ranking pages and user profiles."""

    def __init__(
        self,
        *,
        csrf_token: str | None = None,
        timeout: float = 30.0,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize LeetCode REST connector.

        Args:
            csrf_token: Optional CSRF token sent as cookie and x-csrftoken header
            timeout: Connect and socket-read timeout in seconds
            transport: Optional pre-built transport (tests inject one)
        """
        self._transport = transport or RESTTransport(
            base_url=BASE_URL,
            timeout=timeout,
            headers=auth_headers(csrf_token),
        )
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a LeetCode endpoint.

        Args:
            endpoint_id: Endpoint identifier ("global_ranking", "user_profile")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_page(self, page: int) -> list[RankedUser]:
        """Fetch one ranking page and keep its target-region users.

        Args:
            page: 1-based page index

        Returns:
            Partial users (detail fields at sentinel values) in page order
        """
        if page < 1:
            raise ValueError(f"page must be positive, got {page}")
        return await self.fetch("global_ranking", {"page": page})

    async def fetch_detail(self, username: str) -> UserDetail:
        """Fetch profile detail for one user."""
        return await self.fetch("user_profile", {"username": username})

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> LeetCodeRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
