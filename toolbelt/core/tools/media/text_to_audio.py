import time
from datetime import datetime

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.voice import VoiceProvider
from toolbelt.core.tools.base import SuccessOutput, ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import elapsed, synthesize_and_upload, utc_now
from toolbelt.core.tools.registry import tool_registry

AUDIO_FOLDER = 'ai_upload_text_to_speech'
# Cloudinary serves the same asset in another container when the extension changes
ALTERNATE_FORMATS = ('mp3', 'aac', 'ogg', 'wav')


class TextToAudioInput(ToolInput):
    text: str | None = Field(None, description='Text to speak')


class TextToAudioOutput(SuccessOutput):
    urls: dict[str, str] | None = None
    timestamp: datetime = Field(default_factory=utc_now)
    duration: str = '0 ms'


def format_urls(url: str) -> dict[str, str]:
    urls = {'original': url}
    for extension in ALTERNATE_FORMATS:
        urls[extension] = url.replace('.mp3', f'.{extension}')
    return urls


class TextToAudioToolDefinition(ToolDefinition):
    input_class = TextToAudioInput
    output_class = TextToAudioOutput

    async def execute(self, input: TextToAudioInput) -> TextToAudioOutput:  # type: ignore[override]
        if not input.text or not input.text.strip():
            raise ValueError('Text to convert cannot be empty.')

        timestamp = utc_now()
        started = time.perf_counter()
        try:
            audio = await synthesize_and_upload(input.text, VoiceProvider.AZURE, folder=AUDIO_FOLDER)
        except Exception as e:
            logger.warning('Text to audio failed', error=str(e))
            output = TextToAudioOutput.failure(str(e), timestamp=timestamp, duration=elapsed(started))
            return output  # type: ignore[return-value]

        return TextToAudioOutput(
            success=True,
            urls=format_urls(audio.url),
            timestamp=timestamp,
            duration=elapsed(started),
        )


TextToAudio = TextToAudioToolDefinition(
    id='textToAudio',
    name='Text To Audio',
    category=ToolCategory.MEDIA,
    description='Converts text to speech and returns hosted audio URLs in several formats.',
    required_params={'text': 'Text to convert (required)'},
    demo_body={'text': 'Welcome back! Your appointment is confirmed.'},
)

tool_registry.register(TextToAudio)
