"""REST transport that maps client failures onto the library error hierarchy."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import TransportError
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


class RESTTransport:
    """Thin transport over :class:`HTTPClient`.

    Every network, HTTP status, timeout or JSON decoding failure surfaces as
    :class:`TransportError`; callers never see aiohttp exceptions.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        client: HTTPClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._client = client or HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            return await self._client.post(url, json_body=json_body, headers=headers)
        except aiohttp.ClientResponseError as e:
            raise TransportError(
                f"HTTP {e.status} from {url}: {e.message}", status_code=e.status, url=url
            ) from e
        except asyncio.TimeoutError as e:
            # aiohttp.ServerTimeoutError is also a ClientError
            raise TransportError(f"request to {url} timed out", url=url) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"request to {url} failed: {e}", url=url) from e
        except ValueError as e:
            # json.JSONDecodeError
            raise TransportError(f"undecodable response from {url}: {e}", url=url) from e

    async def close(self) -> None:
        await self._client.close()
