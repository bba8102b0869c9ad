import time
from datetime import datetime

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.messaging import get_whatsapp
from toolbelt.core.tools.base import SuccessOutput, ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import elapsed, require, utc_now, whatsapp_error
from toolbelt.core.tools.registry import tool_registry


class MarkReadInput(ToolInput):
    message_id: str | None = Field(None, description='Incoming WhatsApp message id (wamid...)')


class MarkReadOutput(SuccessOutput):
    message_id: str | None = None
    duration: str = '0 ms'
    timestamp: datetime = Field(default_factory=utc_now)


class MarkWhatsAppMessageReadToolDefinition(ToolDefinition):
    input_class = MarkReadInput
    output_class = MarkReadOutput

    async def execute(self, input: MarkReadInput) -> MarkReadOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        _ = whatsapp.phone_id
        message_id = require(
            input.message_id,
            'Error: Missing required parameter: messageId. Please provide the message ID.',
        )

        timestamp = utc_now()
        started = time.perf_counter()
        error = None
        try:
            await whatsapp.mark_read(message_id)
        except Exception as e:
            logger.warning('Failed to mark WhatsApp message read', message_id=message_id, error=str(e))
            error = whatsapp_error('marking message as read')(str(e))

        return MarkReadOutput(
            success=error is None,
            message_id=message_id,
            duration=elapsed(started),
            timestamp=timestamp,
            error=error,
        )


MarkWhatsAppMessageRead = MarkWhatsAppMessageReadToolDefinition(
    id='markWhatsAppMessageRead',
    name='Mark WhatsApp Message Read',
    category=ToolCategory.COMMUNICATION,
    description='Marks an incoming WhatsApp message as read (blue ticks).',
    required_params={'messageId': 'Incoming message id (required)'},
    demo_body={'messageId': 'wamid.HBgLMTU1NTU1NTAxMjMVAgASGBQzQTk2'},
)

tool_registry.register(MarkWhatsAppMessageRead)
