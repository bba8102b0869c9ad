import asyncio
from typing import Any

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.storage import StorageProvider, UploadRequest, get_storage
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput, ToolOutput, ToolRequest
from toolbelt.core.tools.registry import tool_registry


class CloudinaryUploadInput(ToolInput):
    url: str | None = Field(None, description='Remote file URL for Cloudinary to fetch')
    base64: str | None = Field(None, description='Base64 encoded image')
    file_name: str | None = Field(None, description='public_id to store the asset under')
    cloudinary_asset_folder: str | None = Field(None, description='Destination folder (default serverlessUpload)')


class CloudinaryUploadOutput(ToolOutput):
    message: str
    result: dict[str, Any] | None = None
    file_name: str | None = None
    error: str | None = None


async def upload_one(input: CloudinaryUploadInput) -> CloudinaryUploadOutput:
    if not input.url and not input.base64:
        return CloudinaryUploadOutput(message='Missing required fields')

    request = UploadRequest(
        url=input.url,
        base64=input.base64,
        key=input.file_name,
        folder=input.cloudinary_asset_folder,
        resource_type='image',
    )
    try:
        uploaded = await get_storage(StorageProvider.CLOUDINARY).upload(request)
    except Exception as e:
        logger.warning('Cloudinary upload failed', file_name=input.file_name, error=str(e))
        return CloudinaryUploadOutput(message='Failed to upload image', error=str(e))
    return CloudinaryUploadOutput(message='Image uploaded successfully', result=uploaded.raw, file_name=uploaded.key)


class CloudinaryUploadToolDefinition(ToolDefinition):
    input_class = CloudinaryUploadInput
    output_class = CloudinaryUploadOutput

    async def handle(self, request: ToolRequest) -> Any:
        inputs = [self.validate_input(item) for item in request.items()]
        outputs = await asyncio.gather(*(self.execute(tool_input) for tool_input in inputs))
        responses = [output.to_response() for output in outputs]
        return responses if request.is_batch else responses[0]

    async def execute(self, input: CloudinaryUploadInput) -> CloudinaryUploadOutput:  # type: ignore[override]
        return await upload_one(input)


CloudinaryUpload = CloudinaryUploadToolDefinition(
    id='cloudinaryUpload',
    name='Cloudinary Upload',
    category=ToolCategory.MEDIA,
    description='Uploads an image from a URL or base64 string to Cloudinary. Accepts one upload or a list.',
    required_params={
        'url': 'Remote file URL (url or base64 required)',
        'base64': 'Base64 encoded image (url or base64 required)',
        'fileName': 'public_id for the asset (optional)',
        'cloudinaryAssetFolder': 'Destination folder (optional)',
    },
    demo_body={'url': 'https://upload.wikimedia.org/wikipedia/commons/a/a9/Example.jpg', 'fileName': 'example'},
)

tool_registry.register(CloudinaryUpload)
