"""Text generation proxy endpoint."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from repofolio.config import Settings, get_settings
from repofolio.dependencies import get_gemini_client
from repofolio.models.schemas import ErrorResponse, GenerateResponse
from repofolio.services.gemini_client import GeminiClient
from repofolio.services.request_body import read_json_body

router = APIRouter(tags=["Generation"])


@router.post(
    "/api/gemini/generate",
    response_model=GenerateResponse,
    summary="Generate text with Gemini",
    responses={
        400: {"model": ErrorResponse, "description": "Missing prompt or invalid JSON"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
        502: {"model": ErrorResponse, "description": "Gemini API error"},
        503: {"model": ErrorResponse, "description": "Gemini API key not configured"},
    },
)
async def generate(
    request: Request,
    gemini_client: GeminiClient = Depends(get_gemini_client),
    settings: Settings = Depends(get_settings),
):
    """
    Forward a prompt to Gemini.

    The body must be a JSON object with a non-blank ``prompt`` string and
    must not exceed the configured body limit (default 100 KiB).
    """
    body = await read_json_body(request, settings.max_body_bytes)
    prompt = body.get("prompt") if isinstance(body, dict) else None
    prompt = prompt.strip() if isinstance(prompt, str) else ""
    if not prompt:
        return JSONResponse(
            status_code=400,
            content={
                "error": "missing_prompt",
                "message": 'The "prompt" field is required in the body',
                "detail": None,
            },
        )

    result = await gemini_client.generate(prompt)
    return GenerateResponse(result=result.text or None)
