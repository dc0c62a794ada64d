"""HTTP transport backed by httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from pinecone_client.config import Settings
from pinecone_client.core.constants import API_KEY_HEADER
from pinecone_client.core.logging import debug_event_hooks, get_logger
from pinecone_client.transport.base import TransportResponse

logger = get_logger(__name__)


class HttpTransport:
    """Async HTTP transport bound to one base URL."""

    def __init__(
        self,
        settings: Settings,
        base_url: str,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            settings: Client settings (API key, timeout, debug toggle).
            base_url: Service base URL, e.g. the controller or index host.
            client: Optional preconfigured httpx client (primarily for tests).
        """
        self.settings = settings
        self.base_url = base_url

        self.client = client or httpx.AsyncClient(
            base_url=base_url,
            headers=self._headers(settings),
            timeout=settings.pinecone_timeout,
            event_hooks=debug_event_hooks() if settings.debug else None,
        )

        logger.debug("HttpTransport initialized for '%s'", base_url)

    @staticmethod
    def _headers(settings: Settings) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
        if settings.pinecone_api_key is not None:
            headers[API_KEY_HEADER] = settings.pinecone_api_key
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: str | None = None,
        json: Mapping[str, Any] | None = None,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Send a request and read the whole body before releasing the connection."""
        async with self.client.stream(
            method,
            path,
            params=params,
            json=json,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        ) as response:
            content = await response.aread()

        return TransportResponse(status_code=response.status_code, content=content)

    async def aclose(self) -> None:
        """Close the underlying client."""
        await self.client.aclose()

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
