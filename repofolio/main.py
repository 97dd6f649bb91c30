"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from repofolio import dependencies
from repofolio.config import get_settings
from repofolio.exceptions import (
    ApiHubError,
    GeminiAPIError,
    InvalidRequestBodyError,
    RequestBodyTooLargeError,
    ServiceNotConfiguredError,
    apihub_error_handler,
    gemini_api_error_handler,
    http_exception_handler,
    invalid_request_body_handler,
    request_body_too_large_handler,
    service_not_configured_handler,
)
from repofolio.routers import apihub, generate, health, repos
from repofolio.services.apihub_client import ApiHubClient
from repofolio.services.fallback import load_fallback
from repofolio.services.gemini_client import GeminiClient
from repofolio.services.github_client import GitHubClient
from repofolio.services.repo_cache import ReadThroughCache

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

github_client: GitHubClient | None = None
gemini_client: GeminiClient | None = None
apihub_client: ApiHubClient | None = None
repo_cache: ReadThroughCache | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    global github_client, gemini_client, apihub_client, repo_cache

    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    github_client = GitHubClient(settings)
    await github_client.start()

    gemini_client = GeminiClient(settings)
    await gemini_client.start()

    apihub_client = ApiHubClient(settings)
    await apihub_client.start()

    repo_cache = ReadThroughCache(
        fetch=partial(
            github_client.get_user_repos,
            settings.github_user,
            per_page=settings.github_per_page,
        ),
        ttl_ms=settings.cache_ttl_ms,
        fallback=load_fallback(settings.fallback_path),
        single_flight=settings.cache_single_flight,
    )

    logger.info(f"Listing public repositories of https://github.com/{settings.github_user}")

    yield

    logger.info("Shutting down services")
    await github_client.close()
    await gemini_client.close()
    await apihub_client.close()


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Public GitHub repositories of one user, plus Gemini and apihub proxies",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ServiceNotConfiguredError, service_not_configured_handler)
    app.add_exception_handler(GeminiAPIError, gemini_api_error_handler)
    app.add_exception_handler(ApiHubError, apihub_error_handler)
    app.add_exception_handler(RequestBodyTooLargeError, request_body_too_large_handler)
    app.add_exception_handler(InvalidRequestBodyError, invalid_request_body_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    async def get_github_client_dep():
        return github_client

    async def get_repo_cache_dep():
        return repo_cache

    async def get_gemini_client_dep():
        return gemini_client

    async def get_apihub_client_dep():
        return apihub_client

    app.dependency_overrides[dependencies.get_github_client] = get_github_client_dep
    app.dependency_overrides[dependencies.get_repo_cache] = get_repo_cache_dep
    app.dependency_overrides[dependencies.get_gemini_client] = get_gemini_client_dep
    app.dependency_overrides[dependencies.get_apihub_client] = get_apihub_client_dep

    app.include_router(health.router)
    app.include_router(repos.router)
    app.include_router(generate.router)
    app.include_router(apihub.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "repofolio.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
