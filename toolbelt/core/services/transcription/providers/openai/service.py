import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.services.transcription.base_service import TranscriptionServiceInterface


class OpenAITranscriptionService(TranscriptionServiceInterface):
    """OpenAI audio transcriptions (`whisper-1`)."""

    BASE_URL = 'https://api.openai.com/v1'

    def __init__(self) -> None:
        if not app_config.OPENAI_API_KEY:
            raise ValueError('OPENAI_API_KEY is not set. Please set it in your environment or .env file.')
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.BASE_URL,
                headers={'Authorization': f'Bearer {app_config.OPENAI_API_KEY}'},
                timeout=300.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def transcribe(self, audio: bytes, filename: str = 'audio.mp3') -> str:
        client = await self._get_client()
        response = await client.post(
            '/audio/transcriptions',
            data={'model': app_config.OPENAI_TRANSCRIPTION_MODEL},
            files={'file': (filename, audio)},
        )
        if response.status_code != 200:
            raise RuntimeError(f'OpenAI API error: {response.text}')
        return response.json().get('text', '')
