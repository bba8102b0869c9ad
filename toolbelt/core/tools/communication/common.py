"""Delivery envelope and speech helpers shared by the messaging tools."""

import time
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.messaging import SentMessage
from toolbelt.core.services.storage import StorageFile, StorageProvider, UploadRequest, get_storage
from toolbelt.core.services.voice import SpeechRequest, VoiceProvider, get_voice
from toolbelt.core.tools.base import SuccessOutput

MISSING_RECIPIENT_NUMBER = 'Error: Missing required parameter: to. Please provide the recipient number.'
MISSING_MESSAGE = 'Error: Missing required parameter: message. Please provide the message content.'


def require(value: str | None, message: str) -> str:
    """Return the stripped value or raise `ValueError(message)` when blank."""
    if not value or not value.strip():
        raise ValueError(message)
    return value


def whatsapp_error(action: str) -> Callable[[str], str]:
    return lambda e: f'Error {action}: {e}. Please ensure the API URL and token are correct.'


def elapsed(started: float) -> str:
    return f'{round((time.perf_counter() - started) * 1000)} ms'


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DeliveryOutput(SuccessOutput):
    platform: str = Field(..., description='whatsapp, twilio or gmail')
    type: str = Field(..., description='Message type such as text, location, audio, document or email')
    to: str | None = Field(None, description='Recipient')
    sender: str | None = Field(None, alias='from', description='Sender number or address')
    msg_id: str | None = Field(None, description='Upstream message id')
    duration: str = Field('0 ms', description='Time spent talking to the channel')
    timestamp: datetime = Field(default_factory=utc_now, description='When the send started (UTC)')


async def deliver(
    send: Callable[[], Awaitable[SentMessage]],
    *,
    platform: str,
    type: str,
    to: str,
    sender: str,
    describe_error: Callable[[str], str],
    accept: Callable[[SentMessage], bool] | None = None,
) -> DeliveryOutput:
    """Run one send and wrap the outcome in the delivery envelope.

    Upstream failures do not raise; they set `success: false` and `error`.
    """
    timestamp = utc_now()
    started = time.perf_counter()
    success, msg_id, error = False, None, None
    try:
        sent = await send()
        msg_id = sent.msg_id
        success = accept(sent) if accept else True
    except Exception as e:
        logger.warning('Message delivery failed', platform=platform, type=type, to=to, error=str(e))
        error = describe_error(str(e))

    return DeliveryOutput(
        success=success,
        platform=platform,
        type=type,
        to=to,
        sender=sender,
        msg_id=msg_id,
        duration=elapsed(started),
        timestamp=timestamp,
        error=error,
    )


async def synthesize_and_upload(text: str, provider: VoiceProvider, folder: str | None = None) -> StorageFile:
    """Speak `text` and host the audio on Cloudinary."""
    audio = await get_voice(provider).synthesize(SpeechRequest(text=text))
    return await get_storage(StorageProvider.CLOUDINARY).upload(
        UploadRequest(
            data=audio.data,
            key=str(uuid.uuid4()),
            folder=folder,
            content_type=audio.content_type,
            resource_type='auto',
        )
    )
