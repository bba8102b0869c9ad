from pydantic import Field

from toolbelt.core.services.messaging import get_whatsapp
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.communication.common import (
    MISSING_RECIPIENT_NUMBER,
    DeliveryOutput,
    deliver,
    require,
    whatsapp_error,
)
from toolbelt.core.tools.registry import tool_registry

MISSING_COORDINATES = (
    'Error: Missing required parameters: latitude and longitude. Please provide the location coordinates.'
)
MISSING_TEXT = 'Error: Missing required parameter: text. Please provide the message body text.'


class WhatsAppLocationInput(ToolInput):
    to: str | None = Field(None, description='Recipient WhatsApp number')
    latitude: str | None = Field(None, description='Latitude of the pin')
    longitude: str | None = Field(None, description='Longitude of the pin')
    name: str | None = Field(None, description='Place name shown above the pin')
    address: str | None = Field(None, description='Address shown under the name')


class WhatsAppLocationRequestInput(ToolInput):
    to: str | None = Field(None, description='Recipient WhatsApp number')
    text: str | None = Field(None, description='Prompt shown with the share-location button')


class SendWhatsAppLocationToolDefinition(ToolDefinition):
    input_class = WhatsAppLocationInput
    output_class = DeliveryOutput

    async def execute(self, input: WhatsAppLocationInput) -> DeliveryOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        sender = whatsapp.sender
        to = require(input.to, MISSING_RECIPIENT_NUMBER)
        if not input.latitude or not input.longitude:
            raise ValueError(MISSING_COORDINATES)
        latitude, longitude = input.latitude, input.longitude

        return await deliver(
            lambda: whatsapp.send_location(to, latitude, longitude, input.name, input.address),
            platform='whatsapp',
            type='location',
            to=to,
            sender=sender,
            describe_error=whatsapp_error('sending location message'),
        )


class RequestWhatsAppLocationToolDefinition(ToolDefinition):
    input_class = WhatsAppLocationRequestInput
    output_class = DeliveryOutput

    async def execute(self, input: WhatsAppLocationRequestInput) -> DeliveryOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        sender = whatsapp.sender
        to = require(input.to, MISSING_RECIPIENT_NUMBER)
        text = require(input.text, MISSING_TEXT)

        return await deliver(
            lambda: whatsapp.request_location(to, text),
            platform='whatsapp',
            type='interactive',
            to=to,
            sender=sender,
            describe_error=whatsapp_error('sending location request message'),
        )


SendWhatsAppLocation = SendWhatsAppLocationToolDefinition(
    id='sendWhatsAppLocation',
    name='Send WhatsApp Location',
    category=ToolCategory.COMMUNICATION,
    description='Sends a location pin over WhatsApp.',
    required_params={
        'to': 'Recipient number (required)',
        'latitude': 'Latitude (required)',
        'longitude': 'Longitude (required)',
        'name': 'Place name (optional)',
        'address': 'Address (optional)',
    },
    demo_body={
        'to': '15555550123',
        'latitude': '30.2672',
        'longitude': '-97.7431',
        'name': 'Texas State Capitol',
        'address': '1100 Congress Ave, Austin, TX 78701',
    },
)

RequestWhatsAppLocation = RequestWhatsAppLocationToolDefinition(
    id='requestWhatsAppLocation',
    name='Request WhatsApp Location',
    category=ToolCategory.COMMUNICATION,
    description='Asks a WhatsApp user to share their location with an interactive button.',
    required_params={'to': 'Recipient number (required)', 'text': 'Prompt text (required)'},
    demo_body={'to': '15555550123', 'text': 'Please share your location so we can find the nearest store.'},
)

tool_registry.register(SendWhatsAppLocation)
tool_registry.register(RequestWhatsAppLocation)
