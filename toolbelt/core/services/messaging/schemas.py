from enum import Enum

from pydantic import BaseModel, Field

MISSING_CONFIGURATION = 'Error: Missing or invalid configuration. Please contact the administrator.'


class MessagingProvider(str, Enum):
    """Supported messaging channels."""

    WHATSAPP = 'whatsapp'
    TWILIO = 'twilio'
    GMAIL = 'gmail'


class MessagingError(Exception):
    """Upstream messaging API rejected a request.

    The message is the upstream response body when there is one,
    otherwise the transport error text.
    """


class SentMessage(BaseModel):
    """Result of handing a message to the upstream channel."""

    msg_id: str | None = Field(None, description='Upstream message identifier')
    status: str | None = Field(None, description='Delivery status reported by the channel, if any')


class WhatsAppMedia(BaseModel):
    """Media metadata returned by the Graph API for a media id."""

    id: str
    url: str = Field(description='Short-lived download URL (requires the bearer token)')
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None

    @property
    def extension(self) -> str:
        """File extension derived from the MIME type (`audio/ogg; codecs=opus` -> `ogg`)."""
        if not self.mime_type:
            return 'bin'
        return self.mime_type.split('/')[-1].split(';')[0].strip()
