"""Async client for the Gemini text generation API."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from repofolio.config import Settings
from repofolio.exceptions import GeminiAPIError, ServiceNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Generated text plus the raw API payload."""

    text: str
    raw: dict[str, Any]


class GeminiClient:
    """Async client for Gemini ``generateContent``."""

    def __init__(self, settings: Settings):
        self._base_url = settings.gemini_api_base_url
        self._api_key = settings.gemini_api_key
        self._model = settings.gemini_model
        self._timeout = settings.gemini_timeout
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Initialize the HTTP client."""
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["x-goog-api-key"] = self._api_key

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=self._timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Generate text for a prompt.

        Raises:
            ServiceNotConfiguredError: If no API key is configured
            GeminiAPIError: If the API call fails or returns an unparseable body
        """
        if not self._api_key:
            raise ServiceNotConfiguredError("gemini", "REPOFOLIO_GEMINI_API_KEY")
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            response = await self._client.post(
                f"/v1beta/models/{self._model}:generateContent",
                json=payload,
            )
        except httpx.TimeoutException:
            raise GeminiAPIError(504, "Gemini API request timed out")
        except httpx.RequestError as e:
            raise GeminiAPIError(502, f"Failed to connect to Gemini API: {str(e)}")

        if not 200 <= response.status_code < 300:
            logger.warning(f"Gemini API returned {response.status_code}")
            raise GeminiAPIError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            raise GeminiAPIError(502, "Invalid JSON response from Gemini")

        return GenerationResult(text=extract_text(data), raw=data)


def extract_text(data: Any) -> str:
    """Join the text parts of the first candidate, or return an empty string."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    texts = [
        part["text"] for part in parts
        if isinstance(part, dict) and part.get("text")
    ]
    return " ".join(texts).strip()
