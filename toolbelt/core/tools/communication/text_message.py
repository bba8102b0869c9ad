from pydantic import Field

from toolbelt.core.services.messaging import MessagingProvider, get_messenger
from toolbelt.core.services.messaging.providers.twilio.service import TwilioSmsService
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import (
    MISSING_MESSAGE,
    MISSING_RECIPIENT_NUMBER,
    DeliveryOutput,
    deliver,
    require,
)
from toolbelt.core.tools.registry import tool_registry


class TextMessageInput(ToolInput):
    to: str | None = Field(None, description='Recipient phone number in E.164 format')
    body: str | None = Field(None, description='Message text')


class SendTextMessageToolDefinition(ToolDefinition):
    input_class = TextMessageInput
    output_class = DeliveryOutput

    async def execute(self, input: TextMessageInput) -> DeliveryOutput:  # type: ignore[override]
        sms = get_messenger(MessagingProvider.TWILIO)
        to = require(input.to, MISSING_RECIPIENT_NUMBER)
        body = require(input.body, MISSING_MESSAGE)
        return await deliver(
            lambda: sms.send_text(to, body),
            platform='twilio',
            type='text',
            to=to,
            sender=sms.sender,
            describe_error=lambda e: (
                f'Error sending message: {e}. Please check the Twilio credentials and the recipient number.'
            ),
            accept=TwilioSmsService.is_delivered,
        )


SendTextMessage = SendTextMessageToolDefinition(
    id='sendTextMessage',
    name='Send SMS',
    category=ToolCategory.COMMUNICATION,
    description='Sends an SMS text message through Twilio.',
    required_params={'to': 'Recipient phone number (required)', 'body': 'Message text (required)'},
    demo_body={'to': '+15555550123', 'body': 'Your appointment is confirmed for 3 PM.'},
    demo_response={
        'success': True,
        'platform': 'twilio',
        'type': 'text',
        'to': '+15555550123',
        'from': '+15555550100',
        'msgId': 'SM0123456789abcdef0123456789abcdef',
        'duration': '412 ms',
        'timestamp': '2024-06-10T15:04:05.123456Z',
    },
)

tool_registry.register(SendTextMessage)
