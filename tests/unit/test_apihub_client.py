"""Unit tests for ApiHubClient with mocked HTTP."""

import pytest
from unittest.mock import AsyncMock, MagicMock

import httpx

from repofolio.config import Settings
from repofolio.exceptions import ApiHubError, ServiceNotConfiguredError
from repofolio.services.apihub_client import ApiHubClient


class TestApiHubClient:
    """Unit tests for ApiHubClient."""

    @pytest.fixture
    def client_settings(self):
        return Settings(
            apihub_base_url="https://apihub.example.com/v1/",
            apihub_api_key="hub-key",
        )

    @pytest.mark.asyncio
    async def test_forward_relays_response(self, client_settings):
        """Test that the upstream status, body and content type are relayed."""
        client = ApiHubClient(client_settings)

        mock_response = MagicMock()
        mock_response.status_code = 201
        mock_response.content = b'{"ok": true}'
        mock_response.headers = {"Content-Type": "application/json"}

        mock_http = AsyncMock()
        mock_http.request = AsyncMock(return_value=mock_response)
        client._client = mock_http

        result = await client.forward(
            "POST",
            "items/7",
            params=[("q", "a")],
            body=b'{"name": "x"}',
            content_type="application/json",
        )

        assert result.status_code == 201
        assert result.content == b'{"ok": true}'
        assert result.media_type == "application/json"
        mock_http.request.assert_called_once_with(
            "POST",
            "/items/7",
            params=[("q", "a")],
            content=b'{"name": "x"}',
            headers={"Content-Type": "application/json"},
        )

    @pytest.mark.asyncio
    async def test_forward_relays_error_status(self, client_settings):
        """Test that upstream error statuses are returned, not raised."""
        client = ApiHubClient(client_settings)

        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_response.content = b"missing"
        mock_response.headers = {"Content-Type": "text/plain"}

        mock_http = AsyncMock()
        mock_http.request = AsyncMock(return_value=mock_response)
        client._client = mock_http

        result = await client.forward("GET", "nope")

        assert result.status_code == 404
        assert result.content == b"missing"

    @pytest.mark.asyncio
    async def test_forward_not_configured(self):
        """Test that an unset base URL raises ServiceNotConfiguredError."""
        client = ApiHubClient(Settings(apihub_base_url=None))
        await client.start()

        with pytest.raises(ServiceNotConfiguredError) as exc_info:
            await client.forward("GET", "anything")

        assert exc_info.value.service == "apihub"

    @pytest.mark.asyncio
    async def test_forward_connection_error(self, client_settings):
        """Test handling of connection errors."""
        client = ApiHubClient(client_settings)
        mock_http = AsyncMock()
        mock_http.request = AsyncMock(side_effect=httpx.ConnectError("refused"))
        client._client = mock_http

        with pytest.raises(ApiHubError) as exc_info:
            await client.forward("GET", "items")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_forward_timeout(self, client_settings):
        """Test handling of timeout errors."""
        client = ApiHubClient(client_settings)
        mock_http = AsyncMock()
        mock_http.request = AsyncMock(side_effect=httpx.ConnectTimeout("slow"))
        client._client = mock_http

        with pytest.raises(ApiHubError) as exc_info:
            await client.forward("GET", "items")

        assert exc_info.value.status_code == 504

    @pytest.mark.asyncio
    async def test_start_sends_api_key_header(self, client_settings):
        """Test that the configured key is attached to every request."""
        client = ApiHubClient(client_settings)
        await client.start()

        assert client._client.headers["X-API-Key"] == "hub-key"
        assert str(client._client.base_url) == "https://apihub.example.com/v1/"

        await client.close()
