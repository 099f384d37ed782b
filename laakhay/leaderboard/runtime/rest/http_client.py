"""HTTP client helper."""

from __future__ import annotations

from typing import Any

import aiohttp


class HTTPClient:
    """Async HTTP client wrapper around a lazily created aiohttp session.

    The session's connector has no connection limit, and ``timeout`` bounds
    connecting and each socket read rather than the whole request, so a
    request queued behind a large burst is never timed out while it waits.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=None, sock_connect=timeout, sock_read=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.headers,
                connector=aiohttp.TCPConnector(limit=0),
            )
        return self._session

    def _resolve(self, url: str) -> str:
        # Relative paths are joined onto base_url
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def post(
        self,
        url: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST a JSON body and return the decoded JSON response.

        The body is decoded as JSON regardless of the response content type.

        Raises:
            aiohttp.ClientResponseError: On a 4xx/5xx status. The message is
                the GraphQL ``errors`` messages when the body carries them,
                otherwise the HTTP reason phrase.
        """
        async with self.session.post(
            self._resolve(url), json=json_body, headers=headers
        ) as response:
            if response.status >= 400:
                raise aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=response.status,
                    message=await _failure_reason(response),
                    headers=response.headers,
                )
            return await response.json(content_type=None)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


async def _failure_reason(response: aiohttp.ClientResponse) -> str:
    reason = response.reason or ""
    try:
        body = await response.json(content_type=None)
    except (aiohttp.ClientError, ValueError):
        return reason
    errors = body.get("errors") if isinstance(body, dict) else None
    if not isinstance(errors, list):
        return reason
    messages = [
        e["message"] for e in errors if isinstance(e, dict) and isinstance(e.get("message"), str)
    ]
    return "; ".join(messages) or reason
