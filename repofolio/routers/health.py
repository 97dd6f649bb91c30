"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from repofolio.dependencies import get_github_client, get_repo_cache
from repofolio.models.schemas import CacheStats, HealthResponse
from repofolio.services.github_client import GitHubClient
from repofolio.services.repo_cache import ReadThroughCache

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check(
    cache: ReadThroughCache = Depends(get_repo_cache),
) -> HealthResponse:
    """
    Report that the service is running, with a snapshot of the repository cache.

    Does not contact GitHub; see ``/health/ready`` for that.
    """
    return HealthResponse(
        status="ok",
        version="1.0.0",
        timestamp=datetime.now(timezone.utc),
        cache=CacheStats(**cache.stats()),
    )


@router.get(
    "/health/live",
    summary="Liveness probe",
    description="Simple liveness check for container orchestration",
)
async def liveness():
    """Simple liveness check - returns 200 if service is running."""
    return {"status": "alive"}


@router.get(
    "/health/ready",
    summary="Readiness probe",
)
async def readiness(
    github_client: GitHubClient = Depends(get_github_client),
):
    """Readiness check - verifies external dependencies."""
    github_ok = await github_client.check_health()
    if not github_ok:
        return {"status": "not_ready", "reason": "GitHub API unreachable"}
    return {"status": "ready"}
