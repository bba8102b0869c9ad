"""WhatsApp Cloud (Graph API) client."""

from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.messaging.base_service import MessagingServiceInterface
from toolbelt.core.services.messaging.schemas import (
    MISSING_CONFIGURATION,
    MessagingError,
    SentMessage,
    WhatsAppMedia,
)

PLATFORM = 'whatsapp'


class WhatsAppService(MessagingServiceInterface):
    """Sends messages and fetches media through the WhatsApp Graph API."""

    def __init__(self) -> None:
        if not (app_config.WHATSAPP_GRAPH_API_TOKEN or '').strip() or not app_config.WHATSAPP_GRAPH_API_URL.strip():
            raise ValueError(MISSING_CONFIGURATION)
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=app_config.WHATSAPP_GRAPH_API_URL.rstrip('/'),
                headers={
                    'Authorization': f'Bearer {app_config.WHATSAPP_GRAPH_API_TOKEN}',
                    'Content-Type': 'application/json',
                },
                timeout=60.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def sender(self) -> str:
        number = (app_config.WHATSAPP_ASSISTANT_PHONE_NUMBER or '').strip()
        if not number:
            raise ValueError(MISSING_CONFIGURATION)
        return number

    @property
    def phone_id(self) -> str:
        phone_id = (app_config.WHATSAPP_PHONE_ID or '').strip()
        if not phone_id:
            raise ValueError(MISSING_CONFIGURATION)
        return phone_id

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        client = await self._get_client()
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise MessagingError(str(e) or e.__class__.__name__) from e
        if response.status_code >= 400:
            raise MessagingError(response.text)
        return response

    async def _post_message(self, payload: dict[str, Any]) -> SentMessage:
        payload = {'messaging_product': PLATFORM, **payload}
        logger.info('Posting WhatsApp message', type=payload.get('type'), to=payload.get('to'))
        response = await self._request('POST', f'/{self.phone_id}/messages', json=payload)
        data = response.json()
        messages = data.get('messages') or [{}]
        return SentMessage(msg_id=messages[0].get('id'))

    async def send_text(
        self,
        to: str,
        body: str,
        subject: str | None = None,
        sender_name: str | None = None,
    ) -> SentMessage:
        return await self._post_message({'to': to, 'type': 'text', 'text': {'body': body}})

    async def send_audio(self, to: str, link: str) -> SentMessage:
        """Send an audio message from a public URL."""
        return await self._post_message(
            {
                'recipient_type': 'individual',
                'to': to,
                'type': 'audio',
                'audio': {'link': link},
            }
        )

    async def send_document(self, to: str, link: str, filename: str) -> SentMessage:
        """Send a file from a public URL as a document attachment."""
        return await self._post_message(
            {
                'to': to,
                'type': 'document',
                'document': {'link': link, 'caption': '', 'filename': filename},
            }
        )

    async def send_location(
        self,
        to: str,
        latitude: str,
        longitude: str,
        name: str | None = None,
        address: str | None = None,
    ) -> SentMessage:
        location: dict[str, Any] = {'latitude': latitude, 'longitude': longitude}
        if name:
            location['name'] = name
        if address:
            location['address'] = address
        return await self._post_message(
            {
                'recipient_type': 'individual',
                'to': to,
                'type': 'location',
                'location': location,
            }
        )

    async def request_location(self, to: str, text: str) -> SentMessage:
        """Send an interactive message asking the user to share their location."""
        return await self._post_message(
            {
                'recipient_type': 'individual',
                'to': to,
                'type': 'interactive',
                'interactive': {
                    'type': 'location_request_message',
                    'body': {'text': text},
                    'action': {'name': 'send_location'},
                },
            }
        )

    async def mark_read(self, message_id: str) -> None:
        logger.debug('Marking WhatsApp message read', message_id=message_id)
        await self._request(
            'POST',
            f'/{self.phone_id}/messages',
            json={'messaging_product': PLATFORM, 'status': 'read', 'message_id': message_id},
        )

    async def get_media(self, media_id: str) -> WhatsAppMedia:
        """Look up the download URL and metadata of a media id."""
        response = await self._request('GET', f'/{media_id}')
        data = response.json()
        return WhatsAppMedia(
            id=data.get('id') or media_id,
            url=data['url'],
            mime_type=data.get('mime_type'),
            sha256=data.get('sha256'),
            file_size=data.get('file_size'),
        )

    async def download_media(self, media: WhatsAppMedia) -> bytes:
        """Download media bytes. The media URL needs the same bearer token."""
        logger.info('Downloading WhatsApp media', media_id=media.id, mime_type=media.mime_type)
        response = await self._request('GET', media.url, follow_redirects=True)
        return response.content
