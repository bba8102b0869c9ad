"""Google web search through ScaleSERP."""

import asyncio
from typing import Any

from toolbelt.core.deps import logger
from toolbelt.core.services.search import SearchError, WebSearchRequest, WebSearchResult, get_search
from toolbelt.core.tools.base import MAX_BATCH_SIZE, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.search.common import TOO_MANY_REQUESTS, SearchOutput


class WebSearchInput(ToolInput, WebSearchRequest):
    pass


async def search_one(request: WebSearchRequest) -> WebSearchResult:
    try:
        return await get_search().web_search(request)
    except SearchError as e:
        raise SearchError(f'Failed to retrieve results for query "{request.search_term}": {e}') from e


async def search_all(items: list[dict[str, Any]]) -> SearchOutput:
    """Run every query concurrently; one failed query fails the whole call."""
    if len(items) > MAX_BATCH_SIZE:
        return SearchOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    try:
        results = await asyncio.gather(*(search_one(WebSearchRequest.model_validate(item)) for item in items))
    except Exception as e:
        logger.warning('Web search failed', error=str(e))
        return SearchOutput.failure(f'Error: {e}', data=[])  # type: ignore[return-value]

    data = [result.model_dump(by_alias=True) for result in results]
    if len(data) == 1:
        return SearchOutput(status=True, message='SERP search result retrieved successfully.', data=data[0])
    return SearchOutput(status=True, message='SERP search results retrieved successfully.', data=data)


class GoogleWebSearchToolDefinition(ToolDefinition):
    input_class = WebSearchInput
    output_class = SearchOutput

    async def handle(self, request: ToolRequest) -> Any:
        return (await search_all(request.items())).to_response()

    async def execute(self, input: ToolInput) -> SearchOutput:
        return await search_all([input.model_dump(by_alias=True, exclude_none=True)])


GoogleWebSearch = GoogleWebSearchToolDefinition(
    id='googleWebSearch',
    name='Google Web Search',
    category=ToolCategory.SEARCH,
    description='Google organic search results via ScaleSERP. Accepts one query or a list of up to 50.',
    required_params={
        'searchTerm': 'Search query (required)',
        'location': 'Location to search from (optional)',
        'hostLanguage': 'Interface language, e.g. "en" (optional)',
        'geolocation': 'Country code, e.g. "us" (optional)',
        'device': '"desktop", "tablet" or "mobile" (optional)',
        'numberOfResults': 'Number of results (optional, default 4)',
        'time_period': 'e.g. "last_day", "last_week" (optional)',
    },
    demo_body={'searchTerm': 'best tacos in austin', 'numberOfResults': 3},
)

tool_registry.register(GoogleWebSearch)
