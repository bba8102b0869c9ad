from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.services.prompt.base_service import PromptServiceInterface
from toolbelt.core.services.prompt.schemas import ImageDescriptionRequest, PromptProvider, PromptResult


class OpenAIPromptService(PromptServiceInterface):
    """OpenAI chat completions, including vision input."""

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

    async def _chat(self, messages: list[dict[str, Any]], model: str) -> PromptResult:
        client = await self._get_client()
        response = await client.post('/chat/completions', json={'model': model, 'messages': messages})

        if response.status_code != 200:
            raise Exception(f'OpenAI API error: {response.text}')

        data = response.json()
        usage = data.get('usage', {})
        return PromptResult(
            content=data['choices'][0]['message'].get('content') or '',
            prompt_tokens=usage.get('prompt_tokens'),
            completion_tokens=usage.get('completion_tokens'),
            total_tokens=usage.get('total_tokens'),
            model=model,
            provider=PromptProvider.OPENAI,
        )

    async def complete(
        self,
        prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
    ) -> PromptResult:
        messages = []
        if system_prompt:
            messages.append({'role': 'system', 'content': system_prompt})
        messages.append({'role': 'user', 'content': prompt})
        return await self._chat(messages, model or 'gpt-4o-mini')

    async def describe_image(self, request: ImageDescriptionRequest) -> PromptResult:
        messages = [
            {
                'role': 'user',
                'content': [
                    {'type': 'text', 'text': request.prompt},
                    {'type': 'image_url', 'image_url': {'url': request.image_url, 'detail': request.detail}},
                ],
            }
        ]
        return await self._chat(messages, request.model or app_config.OPENAI_VISION_MODEL)

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
