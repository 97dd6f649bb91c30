"""Repository list endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from repofolio.config import Settings, get_settings
from repofolio.dependencies import get_repo_cache
from repofolio.models.schemas import RepoListResponse
from repofolio.rendering import render_repos_page
from repofolio.services.repo_cache import ReadThroughCache

router = APIRouter(tags=["Repositories"])


@router.get(
    "/api/repos",
    response_model=RepoListResponse,
    summary="List the user's public repositories",
    description=(
        "Returns the cached repository list. Upstream failures are served "
        "from the last cached list or the bundled fallback."
    ),
)
async def list_repos(
    cache: ReadThroughCache = Depends(get_repo_cache),
) -> RepoListResponse:
    repos = await cache.get()
    return RepoListResponse(data=list(repos))


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="HTML page listing the user's public repositories",
)
async def repos_page(
    cache: ReadThroughCache = Depends(get_repo_cache),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    repos = await cache.get()
    return HTMLResponse(
        render_repos_page(repos, settings.github_user, cache.ttl_ms)
    )
