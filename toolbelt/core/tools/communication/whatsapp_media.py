"""Tools that read media a WhatsApp user sent to the assistant."""

from typing import Any, Literal

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.messaging import get_whatsapp
from toolbelt.core.services.prompt import ImageDescriptionRequest, get_prompt
from toolbelt.core.services.storage import StorageProvider, UploadRequest, get_storage
from toolbelt.core.services.transcription import get_transcription_service
from toolbelt.core.tools.base import SuccessOutput, ToolCategory, ToolDefinition, ToolInput, ToolOutput, ToolRequest
from toolbelt.core.tools.registry import tool_registry

IMAGE_FOLDER = 'ai_temp_images'
# Shrinks the delivered image so low-detail vision calls stay cheap
IMAGE_TRANSFORMATION = '/upload/w_500,q_auto:low/'


class WhatsAppImageInput(ToolInput):
    media_id: str | None = Field(None, description='WhatsApp media id of the image')
    quality: Literal['low', 'high'] = Field('low', description='Vision detail level')


class WhatsAppImageOutput(SuccessOutput):
    source: str = 'whatsapp'
    type: str = 'image_upload'
    media_id: str | None = None
    format: str | None = None
    width: int | None = None
    height: int | None = None
    file_size: int | None = None
    analysis: str | None = None


class WhatsAppAudioInput(ToolInput):
    media_id: str | None = Field(None, description='WhatsApp media id of the voice note')


class ListenOutput(ToolOutput):
    success: bool = False
    message: str


class ViewAndDescribeWhatsAppImageToolDefinition(ToolDefinition):
    input_class = WhatsAppImageInput
    output_class = WhatsAppImageOutput

    async def execute(self, input: WhatsAppImageInput) -> WhatsAppImageOutput:  # type: ignore[override]
        try:
            if not input.media_id:
                raise ValueError('Missing required parameter: mediaId')
            whatsapp = get_whatsapp()
            media = await whatsapp.get_media(input.media_id)
            data = await whatsapp.download_media(media)

            storage = get_storage(StorageProvider.CLOUDINARY)
            uploaded = await storage.upload(
                UploadRequest(data=data, folder=IMAGE_FOLDER, content_type=media.mime_type, resource_type='auto')
            )
            image_url = uploaded.url.replace('/upload/', IMAGE_TRANSFORMATION, 1)

            request = ImageDescriptionRequest(image_url=image_url, detail=input.quality)
            result = await get_prompt().describe_image(request)
            await storage.delete(uploaded.key)
        except Exception as e:
            logger.warning('Failed to describe WhatsApp image', media_id=input.media_id, error=str(e))
            return WhatsAppImageOutput.failure(str(e))  # type: ignore[return-value]

        return WhatsAppImageOutput(
            success=True,
            media_id=input.media_id,
            format=uploaded.format,
            width=uploaded.width,
            height=uploaded.height,
            file_size=uploaded.size_bytes,
            analysis=result.content,
        )


class ListenToWhatsAppVoiceAudioToolDefinition(ToolDefinition):
    input_class = WhatsAppAudioInput
    output_class = ListenOutput

    async def handle(self, request: ToolRequest) -> Any:
        # Success is a bare sentence the assistant reads back as its instruction
        tool_input = self.validate_input(request.item())
        try:
            transcript = await self.transcribe(tool_input)  # type: ignore[arg-type]
        except Exception as e:
            logger.warning('Failed to transcribe WhatsApp audio', error=str(e))
            return ListenOutput(message=str(e)).to_response()
        return f'Please respond with a WhatsApp Voice message, the user says : "{transcript}"'

    async def transcribe(self, input: WhatsAppAudioInput) -> str:
        if not input.media_id:
            raise ValueError('Missing required parameter: mediaId')
        whatsapp = get_whatsapp()
        media = await whatsapp.get_media(input.media_id)
        audio = await whatsapp.download_media(media)
        return await get_transcription_service().transcribe(audio, f'audio.{media.extension}')

    async def execute(self, input: WhatsAppAudioInput) -> ListenOutput:  # type: ignore[override]
        try:
            transcript = await self.transcribe(input)
        except Exception as e:
            return ListenOutput(message=str(e))
        return ListenOutput(success=True, message=transcript)


ViewAndDescribeWhatsAppImage = ViewAndDescribeWhatsAppImageToolDefinition(
    id='viewAndDescribeWhatsAppImage',
    name='Describe WhatsApp Image',
    category=ToolCategory.COMMUNICATION,
    description='Downloads an image a user sent on WhatsApp and describes it with a vision model.',
    required_params={'mediaId': 'WhatsApp media id (required)', 'quality': "'low' or 'high' (optional)"},
    demo_body={'mediaId': '1234567890123456', 'quality': 'low'},
)

ListenToWhatsAppVoiceAudio = ListenToWhatsAppVoiceAudioToolDefinition(
    id='listenToWhatsAppVoiceAudio',
    name='Listen To WhatsApp Voice Audio',
    category=ToolCategory.COMMUNICATION,
    description='Transcribes a voice note a user sent on WhatsApp.',
    required_params={'mediaId': 'WhatsApp media id (required)'},
    demo_body={'mediaId': '1234567890123456'},
)

tool_registry.register(ViewAndDescribeWhatsAppImage)
tool_registry.register(ListenToWhatsAppVoiceAudio)
