"""Translate FastAPI requests into `ToolRequest` objects."""

import json
from typing import Any

from fastapi import Request

from toolbelt.core.tools import ToolRequest


async def read_body(request: Request) -> Any:
    """Parsed JSON body, or None when the body is empty or not JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


async def to_tool_request(request: Request) -> ToolRequest:
    return ToolRequest(
        method=request.method,
        body=await read_body(request),
        query=dict(request.query_params),
        headers=dict(request.headers),
    )
