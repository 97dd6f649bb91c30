"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FALLBACK_PATH = Path(__file__).parent / "data" / "fallback-repos.json"


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="REPOFOLIO_")

    app_name: str = "Repofolio"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # GitHub API settings
    github_user: str = "ncolex"
    github_api_base_url: str = "https://api.github.com"
    github_api_timeout: float = 10.0
    github_token: str | None = None
    github_per_page: int = 100

    # Cache settings
    cache_ttl_ms: int = 5 * 60 * 1000
    cache_single_flight: bool = False
    fallback_path: Path = DEFAULT_FALLBACK_PATH

    # Gemini text generation
    gemini_api_key: str | None = None
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com"
    gemini_model: str = "gemini-pro"
    gemini_timeout: float = 30.0

    # ApiHub proxy
    apihub_base_url: str | None = None
    apihub_api_key: str | None = None
    apihub_api_key_header: str = "X-API-Key"
    apihub_timeout: float = 15.0

    # Inbound request bodies
    max_body_bytes: int = 100 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
