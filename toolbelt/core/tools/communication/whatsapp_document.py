from pathlib import PurePosixPath
from urllib.parse import urlparse

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

MISSING_DOCUMENT_URL = (
    'Error: Missing required parameter: document/file URL. Please provide the URL of the document/file to send.'
)
DEFAULT_FILENAME = 'message.mp3'


def document_filename(url: str) -> str:
    """Last path segment of the URL, or the default name when there is none."""
    try:
        name = PurePosixPath(urlparse(url).path).name
    except ValueError:
        return DEFAULT_FILENAME
    return name or DEFAULT_FILENAME


class WhatsAppDocumentInput(ToolInput):
    to: str | None = Field(None, description='Recipient WhatsApp number')
    url: str | None = Field(None, description='Public URL of the file to send')


class SendWhatsAppDocumentToolDefinition(ToolDefinition):
    input_class = WhatsAppDocumentInput
    output_class = DeliveryOutput

    async def execute(self, input: WhatsAppDocumentInput) -> DeliveryOutput:  # type: ignore[override]
        whatsapp = get_whatsapp()
        sender = whatsapp.sender
        to = require(input.to, MISSING_RECIPIENT_NUMBER)
        url = require(input.url, MISSING_DOCUMENT_URL)
        filename = document_filename(url)
        return await deliver(
            lambda: whatsapp.send_document(to, url, filename),
            platform='whatsapp',
            type='document',
            to=to,
            sender=sender,
            describe_error=whatsapp_error('sending message'),
        )


SendWhatsAppDocument = SendWhatsAppDocumentToolDefinition(
    id='sendWhatsAppDocument',
    name='Send WhatsApp Document',
    category=ToolCategory.COMMUNICATION,
    description='Sends a file hosted at a public URL as a WhatsApp document.',
    required_params={'to': 'Recipient number (required)', 'url': 'File URL (required)'},
    demo_body={'to': '15555550123', 'url': 'https://example.com/files/invoice-1042.pdf'},
)

tool_registry.register(SendWhatsAppDocument)
