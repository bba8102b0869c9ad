"""Speak a message with OpenAI TTS and send it as a WhatsApp voice note."""

import re

from pydantic import Field

from toolbelt.core.services.messaging import get_whatsapp
from toolbelt.core.services.voice import VoiceProvider
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import (
    MISSING_RECIPIENT_NUMBER,
    DeliveryOutput,
    deliver,
    require,
    synthesize_and_upload,
    whatsapp_error,
)
from toolbelt.core.tools.registry import tool_registry

# WhatsApp plays AAC voice notes; Cloudinary transcodes on extension change
VOICE_NOTE_EXTENSION = '.aac'


class WhatsAppVoiceInput(ToolInput):
    to: str | None = Field(None, description='Recipient WhatsApp number')
    body: str | None = Field(None, description='Text to speak')


class SendWhatsAppVoiceMessageToolDefinition(ToolDefinition):
    input_class = WhatsAppVoiceInput
    output_class = DeliveryOutput

    async def execute(self, input: WhatsAppVoiceInput) -> DeliveryOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        sender = whatsapp.sender
        to = require(input.to, MISSING_RECIPIENT_NUMBER)

        try:
            require(input.body, 'Missing required parameter: text')
            audio = await synthesize_and_upload(input.body or '', VoiceProvider.OPENAI)
        except Exception as e:
            raise ValueError(f'Error in text to audio conversion: {e}') from e
        link = re.sub(r'\.\w+$', VOICE_NOTE_EXTENSION, audio.url)

        return await deliver(
            lambda: whatsapp.send_audio(to, link),
            platform='whatsapp',
            type='audio',
            to=to,
            sender=sender,
            describe_error=whatsapp_error('sending message'),
        )


SendWhatsAppVoiceMessage = SendWhatsAppVoiceMessageToolDefinition(
    id='sendWhatsAppVoiceMessage',
    name='Send WhatsApp Voice Message',
    category=ToolCategory.COMMUNICATION,
    description='Converts text to speech and sends it as a WhatsApp audio message.',
    required_params={'to': 'Recipient number (required)', 'body': 'Text to speak (required)'},
    demo_body={'to': '15555550123', 'body': 'Your order has shipped and will arrive tomorrow.'},
)

tool_registry.register(SendWhatsAppVoiceMessage)
