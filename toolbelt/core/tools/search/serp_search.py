"""Raw ScaleSERP results, requested with ScaleSERP's own parameter names."""

import asyncio
from typing import Any

from toolbelt.core.services.search import SearchError, SerpSearchRequest, get_search
from toolbelt.core.tools.base import MAX_BATCH_SIZE, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.search.common import TOO_MANY_REQUESTS, SearchOutput


class SerpSearchInput(ToolInput, SerpSearchRequest):
    pass


async def serp_search_one(request: SerpSearchRequest) -> dict[str, Any]:
    try:
        results = await get_search().serp_search(request)
    except SearchError as e:
        raise SearchError(f'Failed to retrieve results for query "{request.q}": {e}') from e
    return {'searchQuery': request.q, 'results': results}


async def serp_search_all(items: list[dict[str, Any]]) -> SearchOutput:
    """Run every query concurrently. Upstream failures propagate to the caller."""
    if len(items) > MAX_BATCH_SIZE:
        return SearchOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    results = await asyncio.gather(*(serp_search_one(SerpSearchRequest.model_validate(item)) for item in items))
    return SearchOutput(status=True, message='SERP search results retrieved successfully.', data=list(results))


class GoogleSerpSearchToolDefinition(ToolDefinition):
    input_class = SerpSearchInput
    output_class = SearchOutput

    async def handle(self, request: ToolRequest) -> Any:
        return (await serp_search_all(request.items())).to_response()

    async def execute(self, input: ToolInput) -> SearchOutput:
        return await serp_search_all([input.model_dump(by_alias=True, exclude_none=True)])


GoogleSerpSearch = GoogleSerpSearchToolDefinition(
    id='googleSerpSearch',
    name='Google SERP Search',
    category=ToolCategory.SEARCH,
    description='This endpoint performs a SERP search using the Scale SERP API.',
    required_params={
        'q': 'Search query (required)',
        'location': 'Location (optional)',
        'hl': 'Host language (optional)',
        'gl': 'Geolocation (optional)',
        'device': 'Device type (optional)',
        'num': 'Number of search results (optional)',
        'max_page': 'Maximum pages to fetch (optional)',
        'include_html': 'Include HTML in results (optional)',
        'output': 'Output format (optional, default: json)',
        'include_answer_box': 'Include answer box in results (optional)',
        'time_period': 'Time period for results (optional)',
    },
    demo_body=[
        {'q': 'Birria Tacos', 'location': 'Austin, Texas', 'num': '3', 'time_period': 'last_week'},
        {'q': 'Best Coffee Shops', 'location': 'New York, NY', 'device': 'mobile', 'num': '5'},
    ],
    demo_response={
        'status': True,
        'message': 'SERP search results retrieved successfully.',
        'data': [
            {'searchQuery': 'Birria Tacos', 'results': {'organic_results': []}},
            {'searchQuery': 'Best Coffee Shops', 'results': {'organic_results': []}},
        ],
    },
)

tool_registry.register(GoogleSerpSearch)
