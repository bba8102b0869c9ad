import asyncio
from typing import Any

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.search import ImageResult, get_search
from toolbelt.core.tools.base import MAX_BATCH_SIZE, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.search.common import TOO_MANY_REQUESTS, SearchOutput


class ImageSearchInput(ToolInput):
    search_term: str | None = Field(None, description='What to search for')
    size: str | None = Field(None, description='ScaleSERP image_size, e.g. "large"')


async def images_for(request: ImageSearchInput) -> list[ImageResult]:
    if not request.search_term:
        raise ValueError('Search term is required')
    return await get_search().image_search(request.search_term, request.size)


async def search_images(items: list[dict[str, Any]]) -> SearchOutput:
    if len(items) > MAX_BATCH_SIZE:
        return SearchOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    try:
        results = await asyncio.gather(*(images_for(ImageSearchInput.model_validate(item)) for item in items))
    except Exception as e:
        logger.warning('Image search failed', error=str(e))
        return SearchOutput.failure(f'Error: {e}', data=[])  # type: ignore[return-value]

    data = [[image.model_dump() for image in images] for images in results]
    return SearchOutput(status=True, message='Images retrieved successfully.', data=data)


class GoogleImageSearchToolDefinition(ToolDefinition):
    input_class = ImageSearchInput
    output_class = SearchOutput

    async def handle(self, request: ToolRequest) -> Any:
        if request.method.upper() not in ('GET', 'POST'):
            return SearchOutput.failure('Invalid request method', data=[]).to_response()
        return (await search_images(request.items())).to_response()

    async def execute(self, input: ToolInput) -> SearchOutput:
        return await search_images([input.model_dump(by_alias=True, exclude_none=True)])


GoogleImageSearch = GoogleImageSearchToolDefinition(
    id='googleImageSearch',
    name='Google Image Search',
    category=ToolCategory.SEARCH,
    description='Google image results (url, width, height) via ScaleSERP.',
    required_params={
        'searchTerm': 'Search query (required)',
        'size': 'Image size filter, e.g. "large" or "medium" (optional)',
    },
    demo_body={'searchTerm': 'golden retriever puppy', 'size': 'large'},
    demo_response={
        'status': True,
        'message': 'Images retrieved successfully.',
        'data': [[{'url': 'https://example.com/puppy.jpg', 'width': 1200, 'height': 800}]],
    },
)

tool_registry.register(GoogleImageSearch)
