import asyncio
from typing import Any

import httpx
from bs4 import BeautifulSoup
from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.tools.base import MAX_BATCH_SIZE, StatusOutput, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'


class WebsiteTextInput(ToolInput):
    url: str | None = Field(None, description='Page to read')


class WebsiteTextOutput(StatusOutput):
    data: list[dict[str, Any]] = Field(default_factory=list, description='One entry per URL')


def body_text(html: str) -> str:
    """Text of the page body, trimmed."""
    soup = BeautifulSoup(html, 'html.parser')
    root = soup.body or soup
    return root.get_text().strip()


async def fetch_text(client: httpx.AsyncClient, url: str | None) -> dict[str, Any]:
    if not url:
        return {'status': False, 'message': 'URL is required'}
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning('Failed to fetch page', url=url, error=str(e))
        return {'status': False, 'message': f'Failed to retrieve content for URL "{url}": {e}'}
    return {'status': True, 'data': body_text(response.text)}


async def fetch_texts(items: list[dict[str, Any]], timeout: float = 30.0) -> WebsiteTextOutput:
    if len(items) > MAX_BATCH_SIZE:
        return WebsiteTextOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    urls = [WebsiteTextInput.model_validate(item).url for item in items]
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        results = await asyncio.gather(*(fetch_text(client, url) for url in urls))
    return WebsiteTextOutput(status=True, message='Webpage text content retrieved successfully.', data=list(results))


class FetchTextContentToolDefinition(ToolDefinition):
    input_class = WebsiteTextInput
    output_class = WebsiteTextOutput

    async def handle(self, request: ToolRequest) -> Any:
        if request.method.upper() not in ('GET', 'POST'):
            return WebsiteTextOutput.failure('Error: Invalid request method').to_response()
        return (await fetch_texts(request.items(), self.timeout_seconds)).to_response()

    async def execute(self, input: WebsiteTextInput) -> WebsiteTextOutput:  # type: ignore[override]
        return await fetch_texts([{'url': input.url}], self.timeout_seconds)


FetchTextContentOfWebsite = FetchTextContentToolDefinition(
    id='fetchTextContentOfWebsite',
    name='Website Text Content',
    category=ToolCategory.WEB,
    description='Fetches web pages and returns the text content of their body. Accepts one URL or a list of up to 50.',
    requires_api_key=False,
    required_params={'url': 'The URL of the webpage (required)'},
    demo_body=[{'url': 'https://example.com'}],
    demo_response={
        'status': True,
        'message': 'Webpage text content retrieved successfully.',
        'data': [{'status': True, 'data': 'Example Domain This domain is for use in illustrative examples...'}],
    },
)

tool_registry.register(FetchTextContentOfWebsite)
