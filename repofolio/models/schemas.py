"""Pydantic models for request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator


class Repo(BaseModel):
    """A public GitHub repository, reduced to the fields the site shows."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    language: str | None = None
    html_url: HttpUrl
    homepage: str | None = None
    updated_at: datetime

    @field_validator("description", "homepage", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        # GitHub sends "" for unset homepages
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RepoListResponse(BaseModel):
    """Response model for the repository list endpoint."""

    data: list[Repo]


class GenerateResponse(BaseModel):
    """Response model for the text generation endpoint."""

    result: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    detail: str | None = None


class CacheStats(BaseModel):
    """Snapshot of the repository cache."""

    populated: bool
    source: str | None = None
    size: int = 0
    fetched_at_ms: int | None = None
    ttl_ms: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = "1.0.0"
    timestamp: datetime
    cache: CacheStats | None = None
