"""Full-page screenshots uploaded to Google Drive."""

from typing import Any
from urllib.parse import urlparse

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.browser import BrowserService
from toolbelt.core.services.storage import StorageProvider, UploadRequest, get_storage
from toolbelt.core.tools.base import StatusOutput, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.utils import sanitize_filename

# Drive metadata returned to callers
SCREENSHOT_FIELDS = ('downloadUrl', 'webViewLink', 'createdTime', 'mimeType', 'iconLink')


def is_valid_url(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


class ScreenshotInput(ToolInput):
    url: str | None = Field(None, description='Page to capture')
    width: int | None = Field(None, description='Viewport width in pixels')
    height: int | None = Field(None, description='Viewport height in pixels')

    def problem(self) -> str | None:
        """First reason the request cannot be captured, if any."""
        if not self.url:
            return 'URL is required'
        if not is_valid_url(self.url):
            return f'Invalid URL format: "{self.url}"'
        if bool(self.width) != bool(self.height):
            return 'Both height and width must be provided together'
        return None


class ScreenshotOutput(StatusOutput):
    url: str | None = Field(None, description='Captured page')
    screenshot_url: dict[str, Any] | None = Field(None, description='Drive file links and metadata')


class ScreenshotBatchOutput(StatusOutput):
    data: list[dict[str, Any]] = Field(default_factory=list)


async def capture(browser: BrowserService, request: ScreenshotInput) -> ScreenshotOutput:
    problem = request.problem()
    if problem:
        return ScreenshotOutput(status=False, message=problem)

    url = request.url or ''
    try:
        image = await browser.screenshot(url, request.width, request.height)
        uploaded = await get_storage(StorageProvider.GDRIVE).upload(
            UploadRequest(
                data=image,
                key=f'screenshot-{sanitize_filename(url)}.png',
                content_type='image/png',
                public=True,
                overwrite=True,
            )
        )
    except Exception as e:
        logger.warning('Screenshot failed', url=url, error=str(e))
        return ScreenshotOutput(status=False, message=f'Failed to capture screenshot for URL "{url}": {e}')

    return ScreenshotOutput(
        status=True,
        url=url,
        screenshot_url={field: uploaded.raw.get(field) for field in SCREENSHOT_FIELDS},
    )


async def capture_all(items: list[dict[str, Any]], timeout: float = 60.0) -> ScreenshotBatchOutput:
    """Capture each page in turn with one shared browser."""
    results: list[ScreenshotOutput] = []
    async with BrowserService(timeout=timeout) as browser:
        for item in items:
            results.append(await capture(browser, ScreenshotInput.model_validate(item)))

    captured = ', '.join(result.url for result in results if result.status and result.url)
    return ScreenshotBatchOutput(
        status=True,
        message=f'Screenshots taken and uploaded successfully for the following URL(s): {captured}',
        data=[result.to_response() for result in results],
    )


class WebsiteScreenshotToolDefinition(ToolDefinition):
    input_class = ScreenshotInput
    output_class = ScreenshotOutput

    async def handle(self, request: ToolRequest) -> Any:
        if request.is_batch:
            return (await capture_all(request.items(), self.timeout_seconds)).to_response()
        return await super().handle(request)

    async def execute(self, input: ScreenshotInput) -> ScreenshotOutput:  # type: ignore[override]
        problem = input.problem()
        if problem:
            return ScreenshotOutput(status=False, message=problem)
        async with BrowserService(timeout=self.timeout_seconds) as browser:
            return await capture(browser, input)


GetWebsiteScreenshot = WebsiteScreenshotToolDefinition(
    id='getWebsiteScreenshot',
    name='Website Screenshot',
    category=ToolCategory.WEB,
    description='Takes a full-page screenshot of a webpage and uploads it to Google Drive.',
    timeout_seconds=60.0,
    required_params={
        'url': 'The URL of the webpage to capture (required)',
        'width': 'Viewport width (optional, requires height)',
        'height': 'Viewport height (optional, requires width)',
    },
    demo_body={'url': 'https://example.com'},
    demo_response={
        'status': True,
        'url': 'https://example.com',
        'screenshotUrl': {
            'downloadUrl': 'https://drive.google.com/uc?id=...&export=download',
            'webViewLink': 'https://drive.google.com/file/d/.../view',
            'createdTime': '2024-06-10T15:04:05.000Z',
            'mimeType': 'image/png',
            'iconLink': 'https://drive-thirdparty.googleusercontent.com/16/type/image/png',
        },
    },
)

tool_registry.register(GetWebsiteScreenshot)
