"""FastAPI application.

Run locally with:
    uvicorn toolbelt.api.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from toolbelt.api.endpoints import router as endpoints_router
from toolbelt.api.tool_requests import read_body, to_tool_request
from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.auth import verify_request_headers
from toolbelt.core.services.database import close_database
from toolbelt.core.services.geocoding import close_geocoders
from toolbelt.core.services.messaging import close_messengers
from toolbelt.core.tools import ToolInfoResponse, ToolsListResponse, tool_registry
from toolbelt.core.tools.discovery import discover_tools

WELCOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body>
  <h1>{title}</h1>
  <p>{count} tools are available through <code>POST /api/toolsHandler</code>.</p>
  <p>Send <code>OPTIONS /api/toolsHandler</code> for the function catalogue.</p>
</body>
</html>
"""


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    tool_ids = discover_tools()
    logger.info('Toolbelt started', environment=app_config.ENVIRONMENT, tools=len(tool_ids))
    yield
    await close_messengers()
    await close_geocoders()
    await close_database()
    logger.info('Toolbelt stopped')


app = FastAPI(title=app_config.PROJECT_NAME, lifespan=lifespan)
app.include_router(endpoints_router)


@app.get('/', response_class=HTMLResponse)
async def welcome() -> str:
    return WELCOME_PAGE.format(title=app_config.PROJECT_NAME, count=len(tool_registry))


@app.get('/api/tools', response_model=ToolsListResponse)
async def list_tools() -> ToolsListResponse:
    tools = [ToolInfoResponse.from_tool(tool) for tool in tool_registry.list_all()]
    return ToolsListResponse(tools=tools, total=len(tools))


@app.api_route('/api/toolsHandler', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
async def tools_handler(request: Request) -> JSONResponse:
    """Dispatch a request to the tool named by its `functionName` (any case)."""
    if request.method == 'OPTIONS':
        return JSONResponse({'tools': [tool.to_function_spec() for tool in tool_registry.list_all()]})

    if not verify_request_headers(request.headers):
        return JSONResponse({'error': 'Unauthorized'}, status_code=401)

    try:
        if request.method != 'POST':
            raise ValueError('Invalid request method')

        body = await read_body(request)
        function_name = body.get('functionName') if isinstance(body, dict) else None
        tool = tool_registry.get_or_raise(function_name)

        logger.info('Dispatching tool', function_name=tool.id)
        result = await tool.handle(await to_tool_request(request))
    except Exception as e:
        logger.warning('Tool dispatch failed', error=str(e))
        return JSONResponse({'error': str(e)}, status_code=400)
    return JSONResponse(result)
