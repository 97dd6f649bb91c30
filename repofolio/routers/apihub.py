"""Pass-through proxy to the configured apihub endpoint."""

from fastapi import APIRouter, Depends, Request, Response

from repofolio.config import Settings, get_settings
from repofolio.dependencies import get_apihub_client
from repofolio.services.apihub_client import ApiHubClient
from repofolio.services.request_body import read_body

router = APIRouter(tags=["ApiHub"])


@router.api_route(
    "/api/apihub/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    summary="Proxy a request to the apihub endpoint",
)
async def proxy_apihub(
    path: str,
    request: Request,
    apihub_client: ApiHubClient = Depends(get_apihub_client),
    settings: Settings = Depends(get_settings),
) -> Response:
    body = await read_body(request, settings.max_body_bytes)
    upstream = await apihub_client.forward(
        method=request.method,
        path=path,
        params=list(request.query_params.multi_items()),
        body=body,
        content_type=request.headers.get("content-type"),
    )
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.media_type,
    )
