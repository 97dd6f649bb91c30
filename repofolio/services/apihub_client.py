"""Pass-through client for the configurable apihub endpoint."""

import logging
from dataclasses import dataclass

import httpx

from repofolio.config import Settings
from repofolio.exceptions import ApiHubError, ServiceNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProxyResponse:
    """Upstream response relayed back to the caller."""

    status_code: int
    content: bytes
    media_type: str | None = None


class ApiHubClient:
    """Forwards requests to ``apihub_base_url`` and relays the response as-is."""

    def __init__(self, settings: Settings):
        self._base_url = settings.apihub_base_url
        self._api_key = settings.apihub_api_key
        self._api_key_header = settings.apihub_api_key_header
        self._timeout = settings.apihub_timeout
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Initialize the HTTP client, if a base URL is configured."""
        if not self._base_url:
            logger.info("ApiHub proxy disabled (no base URL configured)")
            return

        headers = {}
        if self._api_key:
            headers[self._api_key_header] = self._api_key

        self._client = httpx.AsyncClient(
            base_url=self._base_url.rstrip("/"),
            headers=headers,
            timeout=self._timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def forward(
        self,
        method: str,
        path: str,
        params: list[tuple[str, str]] | None = None,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> ProxyResponse:
        """
        Forward one request to the apihub endpoint.

        Upstream error statuses are relayed, not raised.

        Raises:
            ServiceNotConfiguredError: If no base URL is configured
            ApiHubError: If the endpoint cannot be reached
        """
        if not self._base_url:
            raise ServiceNotConfiguredError("apihub", "REPOFOLIO_APIHUB_BASE_URL")
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        headers = {"Content-Type": content_type} if content_type else None

        try:
            response = await self._client.request(
                method,
                f"/{path.lstrip('/')}",
                params=params,
                content=body or None,
                headers=headers,
            )
        except httpx.TimeoutException:
            raise ApiHubError(504, "ApiHub request timed out")
        except httpx.RequestError as e:
            raise ApiHubError(502, f"Failed to connect to apihub: {str(e)}")

        logger.debug(f"ApiHub {method} /{path} -> {response.status_code}")
        return ProxyResponse(
            status_code=response.status_code,
            content=response.content,
            media_type=response.headers.get("Content-Type"),
        )
