"""Size-limited reading of inbound request bodies."""

import json
from typing import Any

from fastapi import Request

from repofolio.exceptions import InvalidRequestBodyError, RequestBodyTooLargeError


async def read_body(request: Request, limit: int) -> bytes:
    """Read the request body, aborting as soon as it exceeds ``limit`` bytes."""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise RequestBodyTooLargeError(limit)
    return bytes(body)


async def read_json_body(request: Request, limit: int) -> Any:
    """Read and parse a JSON body; an empty body parses as ``{}``."""
    body = await read_body(request, limit)
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError as e:
        raise InvalidRequestBodyError(f"Invalid JSON body: {e}") from e
