from pydantic import Field

from toolbelt.core.services.messaging import get_whatsapp
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import (
    MISSING_MESSAGE,
    MISSING_RECIPIENT_NUMBER,
    DeliveryOutput,
    deliver,
    require,
    whatsapp_error,
)
from toolbelt.core.tools.registry import tool_registry


class WhatsAppMessageInput(ToolInput):
    to: str | None = Field(None, description='Recipient WhatsApp number')
    body: str | None = Field(None, description='Message text')


class SendWhatsAppMessageToolDefinition(ToolDefinition):
    input_class = WhatsAppMessageInput
    output_class = DeliveryOutput

    async def execute(self, input: WhatsAppMessageInput) -> DeliveryOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        sender = whatsapp.sender
        to = require(input.to, MISSING_RECIPIENT_NUMBER)
        body = require(input.body, MISSING_MESSAGE)
        return await deliver(
            lambda: whatsapp.send_text(to, body),
            platform='whatsapp',
            type='text',
            to=to,
            sender=sender,
            describe_error=whatsapp_error('sending message'),
        )


SendWhatsAppMessage = SendWhatsAppMessageToolDefinition(
    id='sendWhatsAppMessage',
    name='Send WhatsApp Message',
    category=ToolCategory.COMMUNICATION,
    description='Sends a WhatsApp text message through the Graph API.',
    required_params={'to': 'Recipient number (required)', 'body': 'Message text (required)'},
    demo_body={'to': '15555550123', 'body': 'Hello from the assistant!'},
)

tool_registry.register(SendWhatsAppMessage)
