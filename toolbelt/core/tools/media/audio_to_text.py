from typing import Any

import httpx
from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.transcription import get_transcription_service
from toolbelt.core.tools.base import SuccessOutput, ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.registry import tool_registry


class AudioToTextInput(ToolInput):
    file_url: str | None = Field(None, description='Public URL of the audio file')


class AudioToTextOutput(SuccessOutput):
    data: Any = None


async def download(url: str, timeout: float) -> bytes:
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        response = await client.get(url)
        response.raise_for_status()
        return response.content


def filename_for(url: str) -> str:
    name = url.split('?')[0].rstrip('/').rsplit('/', 1)[-1]
    return name if '.' in name else 'audio.mp3'


class AudioToTextFileToolDefinition(ToolDefinition):
    input_class = AudioToTextInput
    output_class = AudioToTextOutput

    async def execute(self, input: AudioToTextInput) -> AudioToTextOutput:  # type: ignore[override]
        if not input.file_url:
            return AudioToTextOutput.failure('Missing required parameter: fileUrl')  # type: ignore[return-value]

        try:
            audio = await download(input.file_url, self.timeout_seconds)
            transcript = await get_transcription_service().transcribe(audio, filename_for(input.file_url))
        except Exception as e:
            logger.warning('Audio transcription failed', url=input.file_url, error=str(e))
            return AudioToTextOutput.failure(str(e))  # type: ignore[return-value]
        return AudioToTextOutput(success=True, data=transcript)


AudioToTextFile = AudioToTextFileToolDefinition(
    id='audioToTextFile',
    name='Audio To Text',
    category=ToolCategory.MEDIA,
    description='Transcribes an audio file at a public URL.',
    timeout_seconds=120.0,
    required_params={'fileUrl': 'Audio file URL (required)'},
    demo_body={'fileUrl': 'https://res.cloudinary.com/demo/video/upload/sample.mp3'},
)

tool_registry.register(AudioToTextFile)
