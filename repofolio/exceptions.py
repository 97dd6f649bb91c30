"""Custom exceptions and FastAPI exception handlers."""

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class UpstreamFetchError(Exception):
    """Raised when the repository listing cannot be fetched from upstream."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Upstream fetch failed ({status_code}): {message}")


class GitHubAPIError(UpstreamFetchError):
    """Raised when GitHub API returns an error."""


class GitHubUserNotFoundError(GitHubAPIError):
    """Raised when GitHub user doesn't exist."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(404, f"GitHub user '{username}' not found")


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API rate limit is exceeded."""

    def __init__(self, reset_time: str | None = None):
        self.reset_time = reset_time
        super().__init__(403, "GitHub API rate limit exceeded")


class FallbackLoadError(Exception):
    """Raised when the bundled fallback dataset cannot be read or parsed."""


class ServiceNotConfiguredError(Exception):
    """Raised when a proxied service is called without its configuration."""

    def __init__(self, service: str, setting: str):
        self.service = service
        self.setting = setting
        super().__init__(f"{service} is not configured (missing {setting})")


class GeminiAPIError(Exception):
    """Raised when the Gemini API call fails."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Gemini API error ({status_code}): {message}")


class ApiHubError(Exception):
    """Raised when the apihub endpoint cannot be reached."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"ApiHub error ({status_code}): {message}")


class RequestBodyTooLargeError(Exception):
    """Raised when an inbound request body exceeds the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Request body exceeds the limit of {limit} bytes")


class InvalidRequestBodyError(Exception):
    """Raised when an inbound request body is not valid JSON."""


async def service_not_configured_handler(
    request: Request,
    exc: ServiceNotConfiguredError,
) -> JSONResponse:
    """Handle ServiceNotConfiguredError."""
    return JSONResponse(
        status_code=503,
        content={
            "error": "service_not_configured",
            "message": f"The {exc.service} integration is not configured",
            "detail": f"Set the {exc.setting} setting to enable it",
        },
    )


async def gemini_api_error_handler(
    request: Request,
    exc: GeminiAPIError,
) -> JSONResponse:
    """Handle GeminiAPIError."""
    return JSONResponse(
        status_code=502,
        content={
            "error": "gemini_api_error",
            "message": "Could not process the request with Gemini",
            "detail": exc.message,
        },
    )


async def apihub_error_handler(
    request: Request,
    exc: ApiHubError,
) -> JSONResponse:
    """Handle ApiHubError."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": "apihub_error",
            "message": "Error communicating with the apihub endpoint",
            "detail": exc.message,
        },
    )


async def request_body_too_large_handler(
    request: Request,
    exc: RequestBodyTooLargeError,
) -> JSONResponse:
    """Handle RequestBodyTooLargeError."""
    return JSONResponse(
        status_code=413,
        content={
            "error": "payload_too_large",
            "message": "The request body exceeds the allowed limit",
            "detail": str(exc),
        },
    )


async def invalid_request_body_handler(
    request: Request,
    exc: InvalidRequestBodyError,
) -> JSONResponse:
    """Handle InvalidRequestBodyError."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "invalid_request_body",
            "message": "Could not parse the JSON request body",
            "detail": str(exc) or None,
        },
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Render routing errors with the standard error body."""
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": "Route not found",
                "detail": None,
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
        content={
            "error": "http_error",
            "message": str(exc.detail),
            "detail": None,
        },
    )
