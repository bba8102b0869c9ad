"""Standalone endpoints that expose one tool each.

Every endpoint answers OPTIONS with the tool's interface description and
runs the tool for GET (query parameters) and POST (object or list body).
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from toolbelt.api.tool_requests import to_tool_request
from toolbelt.core.deps import logger
from toolbelt.core.tools import ToolRequest, tool_registry
from toolbelt.core.tools.location.ip_lookup import answer_ip_request

router = APIRouter(prefix='/api')

METHODS = ['GET', 'POST', 'OPTIONS']


@dataclass(frozen=True)
class Endpoint:
    path: str
    tool_id: str
    # Key the whole response is nested under, e.g. {"data": {...}}
    wrap: str | None = None
    # 'message' answers {status: false, message}; 'error' answers {error}
    error_style: str = 'message'
    error_status: int = 500
    # Replaces tool.handle() where the endpoint answers differently from toolsHandler
    run: Callable[[ToolRequest], Awaitable[Any]] | None = None


ENDPOINTS = [
    Endpoint('/location', 'locationResolver', wrap='data'),
    Endpoint('/ip', 'ipAddressLookup', run=answer_ip_request),
    Endpoint('/phonenumber', 'parsePhoneNumber'),
    Endpoint('/geocode', 'geocodeAddress'),
    Endpoint('/weather', 'getWeatherForecast', error_style='error', error_status=400),
    Endpoint('/solar', 'getSunriseSunset', error_style='error', error_status=400),
    Endpoint('/search-google', 'googleSerpSearch'),
    Endpoint('/search-image', 'googleImageSearch'),
    Endpoint('/getWebsiteScreenshot', 'getWebsiteScreenshot'),
    Endpoint('/getCurrentDateTime', 'getCurrentDateTime'),
    Endpoint('/area', 'convertArea'),
    Endpoint('/length', 'convertLength'),
    Endpoint('/speed', 'convertSpeed'),
    Endpoint('/temperature', 'convertTemperature'),
    Endpoint('/volume', 'convertVolume'),
    Endpoint('/weight', 'convertWeight'),
]


def is_rejected_batch(result: Any) -> bool:
    """Batch-size rejections come back as a failed envelope with an empty list."""
    if not isinstance(result, dict) or result.get('status') is not False:
        return False
    return str(result.get('message', '')).startswith('Too many')


async def run_endpoint(endpoint: Endpoint, request: Request) -> JSONResponse:
    tool = tool_registry.get_or_raise(endpoint.tool_id)
    if request.method == 'OPTIONS':
        return JSONResponse(tool.describe())

    status_code = 200
    try:
        tool_request = await to_tool_request(request)
        result = await (endpoint.run or tool.handle)(tool_request)
        if is_rejected_batch(result):
            status_code = 400
    except Exception as e:
        logger.exception('Endpoint failed', path=endpoint.path, tool=endpoint.tool_id)
        status_code = endpoint.error_status
        if endpoint.error_style == 'error':
            result = {'error': str(e)}
        else:
            result = {'status': False, 'message': f'Error: {e}'}

    if endpoint.wrap:
        result = {endpoint.wrap: result}
    return JSONResponse(result, status_code=status_code)


def _add_route(endpoint: Endpoint) -> None:
    async def handler(request: Request) -> JSONResponse:
        return await run_endpoint(endpoint, request)

    handler.__name__ = f'endpoint_{endpoint.tool_id}'
    router.add_api_route(endpoint.path, handler, methods=METHODS)


for _endpoint in ENDPOINTS:
    _add_route(_endpoint)
