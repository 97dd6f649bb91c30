"""Shared test fixtures and sample data."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

from repofolio import dependencies
from repofolio.config import Settings, get_settings
from repofolio.main import app
from repofolio.models.schemas import Repo
from repofolio.services.apihub_client import ApiHubClient
from repofolio.services.gemini_client import GeminiClient, GenerationResult
from repofolio.services.github_client import GitHubClient
from repofolio.services.repo_cache import ReadThroughCache

# Sample test data matching GitHub API response for octocat
SAMPLE_REPO_DATA = {
    "id": 1296269,
    "node_id": "MDEwOlJlcG9zaXRvcnkxMjk2MjY5",
    "name": "Hello-World",
    "full_name": "octocat/Hello-World",
    "private": False,
    "html_url": "https://github.com/octocat/Hello-World",
    "description": "My first repository on GitHub!",
    "fork": False,
    "language": None,
    "homepage": "",
    "stargazers_count": 80,
    "created_at": "2011-01-26T19:01:12Z",
    "updated_at": "2025-11-20T08:14:38Z",
    "pushed_at": "2024-09-17T10:07:54Z",
}


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start: int = 1_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def settings():
    """Test settings."""
    return Settings(
        cache_ttl_ms=60_000,
        github_api_timeout=5.0,
        max_body_bytes=1024,
    )


@pytest.fixture
def sample_repo_data():
    """Sample repository data for testing."""
    return SAMPLE_REPO_DATA


@pytest.fixture
def sample_repo(sample_repo_data) -> Repo:
    """Sample Repo model for testing."""
    return Repo(
        id=sample_repo_data["id"],
        name=sample_repo_data["name"],
        description=sample_repo_data["description"],
        language=sample_repo_data["language"],
        html_url=sample_repo_data["html_url"],
        homepage=sample_repo_data["homepage"],
        updated_at=sample_repo_data["updated_at"],
    )


@pytest.fixture
def fallback_repo() -> Repo:
    """A repository that only exists in the fallback dataset."""
    return Repo(
        id=42,
        name="fallback-project",
        description=None,
        language="Python",
        html_url="https://github.com/octocat/fallback-project",
        homepage="https://octocat.github.io/fallback-project",
        updated_at="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def clock():
    """Fake millisecond clock."""
    return FakeClock()


@pytest.fixture
def fetch(sample_repo):
    """Upstream fetch returning the sample repository."""
    return AsyncMock(return_value=[sample_repo])


@pytest.fixture
def repo_cache(fetch, clock, fallback_repo, settings):
    """Fresh cache instance for each test."""
    return ReadThroughCache(
        fetch=fetch,
        ttl_ms=settings.cache_ttl_ms,
        fallback=[fallback_repo],
        clock=clock,
    )


@pytest.fixture
def mock_github_client():
    """Mocked GitHub client."""
    mock_client = AsyncMock(spec=GitHubClient)
    mock_client.check_health.return_value = True
    return mock_client


@pytest.fixture
def mock_gemini_client():
    """Mocked Gemini client."""
    mock_client = AsyncMock(spec=GeminiClient)
    mock_client.generate.return_value = GenerationResult(
        text="Hola mundo",
        raw={"candidates": []},
    )
    return mock_client


@pytest.fixture
def mock_apihub_client():
    """Mocked apihub client."""
    return AsyncMock(spec=ApiHubClient)


@pytest_asyncio.fixture
async def test_client(
    mock_github_client,
    mock_gemini_client,
    mock_apihub_client,
    repo_cache,
    settings,
):
    """AsyncClient for testing with mocked dependencies."""
    app.dependency_overrides[dependencies.get_github_client] = lambda: mock_github_client
    app.dependency_overrides[dependencies.get_repo_cache] = lambda: repo_cache
    app.dependency_overrides[dependencies.get_gemini_client] = lambda: mock_gemini_client
    app.dependency_overrides[dependencies.get_apihub_client] = lambda: mock_apihub_client
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
