"""Async GitHub API client using httpx."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from repofolio.config import Settings
from repofolio.exceptions import (
    GitHubAPIError,
    GitHubRateLimitError,
    GitHubUserNotFoundError,
)
from repofolio.models.schemas import Repo

logger = logging.getLogger(__name__)

USER_AGENT = "Repofolio-App"


class GitHubClient:
    """Async client for the GitHub repositories API."""

    def __init__(self, settings: Settings):
        self._base_url = settings.github_api_base_url
        self._timeout = settings.github_api_timeout
        self._token = settings.github_token
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GitHubClient":
        await self.start()
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def start(self) -> None:
        """Initialize the HTTP client."""
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

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

    async def get_user_repos(
        self,
        username: str,
        per_page: int = 100,
    ) -> list[Repo]:
        """
        Fetch public repositories for a GitHub user, most recently updated first.

        Args:
            username: GitHub username
            per_page: Number of repositories to request (max 100)

        Returns:
            List of Repo objects

        Raises:
            GitHubUserNotFoundError: If user doesn't exist
            GitHubRateLimitError: If rate limit exceeded
            GitHubAPIError: For other API errors or unparseable responses
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Call start() first.")

        try:
            response = await self._client.get(
                f"/users/{username}/repos",
                params={"sort": "updated", "per_page": per_page},
            )
        except httpx.TimeoutException:
            raise GitHubAPIError(
                status_code=504,
                message="GitHub API request timed out",
            )
        except httpx.RequestError as e:
            raise GitHubAPIError(
                status_code=502,
                message=f"Failed to connect to GitHub API: {str(e)}",
            )

        if response.status_code == 404:
            raise GitHubUserNotFoundError(username)

        if response.status_code == 403:
            remaining = response.headers.get("X-RateLimit-Remaining", "0")
            if remaining == "0":
                reset_time = response.headers.get("X-RateLimit-Reset")
                raise GitHubRateLimitError(reset_time)
            raise GitHubAPIError(status_code=403, message="Access forbidden")

        if response.status_code != 200:
            raise GitHubAPIError(
                status_code=response.status_code,
                message=response.text,
            )

        try:
            data = response.json()
        except ValueError:
            raise GitHubAPIError(
                status_code=502,
                message="Invalid JSON response from GitHub",
            )

        if not isinstance(data, list):
            raise GitHubAPIError(
                status_code=502,
                message="Unexpected response shape from GitHub",
            )

        try:
            return [self._parse_repo(repo_data) for repo_data in data]
        except (KeyError, TypeError, ValidationError) as e:
            raise GitHubAPIError(
                status_code=502,
                message=f"Malformed repository data from GitHub: {e}",
            )

    async def check_health(self) -> bool:
        """Check if GitHub API is reachable."""
        if not self._client:
            return False
        try:
            response = await self._client.get("/rate_limit")
            return response.status_code == 200
        except Exception:
            return False

    def _parse_repo(self, data: dict[str, Any]) -> Repo:
        """Parse raw API response into Repo model."""
        return Repo(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            language=data.get("language"),
            html_url=data["html_url"],
            homepage=data.get("homepage"),
            updated_at=data["updated_at"],
        )
