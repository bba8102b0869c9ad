import base64
import binascii
import re
from enum import Enum

from pydantic import BaseModel, Field

_BASE64_RE = re.compile(r'^[A-Za-z0-9+/]+={0,2}$')


class EmailEncodingType(str, Enum):
    """Parts of a Gmail message that need encoding."""

    SUBJECT = 'Subject'
    MIME_MESSAGE = 'MimeMessage'
    ATTACHMENT = 'Attachment'


class EncodedEmailContent(BaseModel):
    """Result of encoding one part of an email."""

    encoded_content: str = Field('', description='Encoded value')
    is_encoded: bool = Field(..., description='Whether encoding succeeded')
    message: str = Field('', description='Outcome description')


def _is_base64(value: str) -> bool:
    if not value or len(value) % 4 or not _BASE64_RE.match(value):
        return False
    try:
        base64.b64decode(value, validate=True)
    except binascii.Error:
        return False
    return True


def encode_email_content(content: str, type: EmailEncodingType | str) -> EncodedEmailContent:
    """Encode an email subject, raw MIME message or attachment body."""
    try:
        encoding_type = EmailEncodingType(type)
    except ValueError:
        return EncodedEmailContent(is_encoded=False, message=f'Invalid encoding type: {type}')

    if encoding_type == EmailEncodingType.SUBJECT:
        subject = content or 'No Subject'
        encoded = base64.b64encode(subject.encode('utf-8')).decode('ascii')
        return EncodedEmailContent(
            encoded_content=f'=?utf-8?B?{encoded}?=',
            is_encoded=True,
            message='Subject encoded successfully.',
        )

    if encoding_type == EmailEncodingType.MIME_MESSAGE:
        encoded = base64.urlsafe_b64encode(content.encode('utf-8')).decode('ascii')
        return EncodedEmailContent(
            encoded_content=encoded,
            is_encoded=True,
            message='MIME message encoded successfully.',
        )

    if _is_base64(content):
        return EncodedEmailContent(
            encoded_content=content,
            is_encoded=True,
            message='Attachment content was already Base64 encoded.',
        )
    return EncodedEmailContent(
        encoded_content=base64.b64encode(content.encode('utf-8')).decode('ascii'),
        is_encoded=True,
        message='Attachment encoded successfully.',
    )
