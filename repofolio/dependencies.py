"""Dependency placeholders shared by the routers.

Each one is overridden in main.py with the instance created at startup.
"""

from repofolio.services.apihub_client import ApiHubClient
from repofolio.services.gemini_client import GeminiClient
from repofolio.services.github_client import GitHubClient
from repofolio.services.repo_cache import ReadThroughCache


async def get_github_client() -> GitHubClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_repo_cache() -> ReadThroughCache:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_gemini_client() -> GeminiClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError


async def get_apihub_client() -> ApiHubClient:
    """Placeholder - overridden in main.py."""
    raise NotImplementedError
