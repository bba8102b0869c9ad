from xml.sax.saxutils import escape

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.services.voice.base_service import VoiceServiceInterface
from toolbelt.core.services.voice.schemas import SpeechAudio, SpeechRequest

# 16 kHz mono MP3, the format the uploaded files are served in
OUTPUT_FORMAT = 'audio-16khz-128kbitrate-mono-mp3'


class AzureVoiceService(VoiceServiceInterface):
    """Azure Cognitive Services text-to-speech REST API."""

    def __init__(self) -> None:
        if not app_config.AZURE_SPEECH_KEY:
            raise ValueError('AZURE_SPEECH_KEY is not defined in environment variables.')
        if not app_config.AZURE_SPEECH_REGION:
            raise ValueError('AZURE_SPEECH_REGION is not defined in environment variables.')
        self._client: httpx.AsyncClient | None = None

    @property
    def endpoint(self) -> str:
        return f'https://{app_config.AZURE_SPEECH_REGION}.tts.speech.microsoft.com/cognitiveservices/v1'

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    'Ocp-Apim-Subscription-Key': app_config.AZURE_SPEECH_KEY or '',
                    'Content-Type': 'application/ssml+xml',
                    'X-Microsoft-OutputFormat': OUTPUT_FORMAT,
                    'User-Agent': 'ai-toolbelt',
                },
                timeout=120.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def build_ssml(text: str, voice: str) -> str:
        return (
            "<speak version='1.0' xml:lang='en-US'>"
            f"<voice name='{voice}'>{escape(text)}</voice>"
            '</speak>'
        )

    async def synthesize(self, request: SpeechRequest) -> SpeechAudio:
        client = await self._get_client()
        voice = request.voice or app_config.AZURE_SPEECH_VOICE
        response = await client.post(self.endpoint, content=self.build_ssml(request.text, voice).encode('utf-8'))
        if response.status_code != 200:
            raise RuntimeError(f'Azure speech error: {response.status_code} {response.text}')
        return SpeechAudio(data=response.content, content_type='audio/mpeg', extension='mp3')
