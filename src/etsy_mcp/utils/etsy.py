"""HTTP client for the Etsy Open API (v3).

Every request carries the application key in the ``x-api-key`` header. If the
credentials hold an OAuth access token, every request also carries
``Authorization: Bearer <token>``. Headers are derived once, at construction.

Example:
    ```python
    config = EtsyConfig.resolve()
    async with EtsyClient(config) as client:
        shop = await client.get("/application/shops/12345")
    ```
"""

from __future__ import annotations

from http import HTTPStatus
import logging
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from etsy_mcp.config.etsy import EtsyConfig

logger = logging.getLogger(__name__)

USER_AGENT = "etsy-mcp/1.0"


class EtsyMCPError(Exception):
    """Base exception for the Etsy MCP server."""

    pass


class EtsyClient:
    """Async HTTP client for the Etsy Open API.

    Non-2xx responses raise ``httpx.HTTPStatusError``, network failures raise
    ``httpx.RequestError``. Callers decide how to report them.

    Can be used as a context manager or directly:

        async with EtsyClient(config) as client:
            listing = await client.get("/application/listings/1")

        client = EtsyClient(config)
        try:
            listing = await client.get("/application/listings/1")
        finally:
            await client.close()
    """

    def __init__(
        self,
        config: EtsyConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Etsy client.

        Args:
            config: EtsyConfig with credentials and base URL
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = config.base_url.rstrip("/")

        headers = {
            "x-api-key": str(config.api_key),
            "User-Agent": USER_AGENT,
        }
        # Add OAuth token if available for authenticated requests
        if config.access_token:
            headers["Authorization"] = f"Bearer {config.access_token}"

        self._headers = headers
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Headers attached to every outgoing request (copy)."""
        return dict(self._headers)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers,
                transport=self._transport,
            )
        return self._client

    async def __aenter__(self) -> EtsyClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send one request and decode the JSON response.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            path: Path relative to the base URL (e.g. "/application/shops/1")
            params: Query-string parameters
            json: JSON request body

        Returns:
            Decoded JSON body (raw text if not JSON), or None for an empty body

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.RequestError: When the API is not reachable
        """
        logger.debug("%s %s", method, path)
        response = await self.client.request(method, path, params=params, json=json)
        response.raise_for_status()

        if response.status_code == HTTPStatus.NO_CONTENT or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Retrieve a resource."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        """Create a resource."""
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        """Partially update a resource."""
        return await self.request("PATCH", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        """Update a resource."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Any:
        """Remove a resource."""
        return await self.request("DELETE", path)
