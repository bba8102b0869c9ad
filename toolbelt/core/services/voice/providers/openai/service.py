import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.services.voice.base_service import VoiceServiceInterface
from toolbelt.core.services.voice.schemas import SpeechAudio, SpeechRequest

CONTENT_TYPES = {
    'mp3': 'audio/mpeg',
    'aac': 'audio/aac',
    'opus': 'audio/ogg',
    'wav': 'audio/wav',
    'flac': 'audio/flac',
}


class OpenAIVoiceService(VoiceServiceInterface):
    """OpenAI speech endpoint (`tts-1`)."""

    BASE_URL = 'https://api.openai.com/v1'

    def __init__(self) -> None:
        if not app_config.OPENAI_API_KEY:
            raise ValueError('OPENAI_API_KEY is not set. Please set it in your environment or .env file.')
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={
                    'Authorization': f'Bearer {app_config.OPENAI_API_KEY}',
                    'Content-Type': 'application/json',
                },
                timeout=120.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def synthesize(self, request: SpeechRequest) -> SpeechAudio:
        client = await self._get_client()
        response = await client.post(
            '/audio/speech',
            json={
                'model': app_config.OPENAI_TTS_MODEL,
                'voice': request.voice or app_config.OPENAI_TTS_VOICE,
                'input': request.text,
                'response_format': request.output_format,
            },
        )
        if response.status_code != 200:
            raise RuntimeError(f'OpenAI API error: {response.text}')

        return SpeechAudio(
            data=response.content,
            content_type=CONTENT_TYPES.get(request.output_format, 'application/octet-stream'),
            extension=request.output_format,
        )
