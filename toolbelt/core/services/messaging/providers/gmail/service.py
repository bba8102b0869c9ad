import asyncio
from typing import Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.messaging.base_service import MessagingServiceInterface
from toolbelt.core.services.messaging.schemas import MessagingError, SentMessage
from toolbelt.core.services.workspace.credentials import load_service_account_credentials
from toolbelt.core.utils import EmailEncodingType, encode_email_content

GMAIL_SCOPES = ['https://www.googleapis.com/auth/gmail.send']


class GmailService(MessagingServiceInterface):
    """Sends email through the Gmail API with a delegated service account."""

    def __init__(self) -> None:
        credentials = load_service_account_credentials(GMAIL_SCOPES, subject=app_config.GMAIL_SENDER_EMAIL)
        self._sender_email = app_config.GMAIL_SENDER_EMAIL or credentials.service_account_email
        self._api: Any = build('gmail', 'v1', credentials=credentials, cache_discovery=False)

    @property
    def sender(self) -> str:
        return self._sender_email

    def build_raw_message(self, to: str, body: str, subject: str | None, sender_name: str | None) -> str:
        """Assemble the urlsafe base64 MIME message the Gmail API expects."""
        encoded_subject = encode_email_content(subject or '', EmailEncodingType.SUBJECT)
        if not encoded_subject.is_encoded:
            raise MessagingError(f'Error encoding subject: {encoded_subject.message}')

        from_header = f'{sender_name} <{self.sender}>' if sender_name else self.sender
        mime = '\r\n'.join(
            [
                f'From: {from_header}',
                f'To: {to}',
                f'Subject: {encoded_subject.encoded_content}',
                'MIME-Version: 1.0',
                'Content-Type: text/html; charset=utf-8',
                '',
                body,
            ]
        )
        return encode_email_content(mime, EmailEncodingType.MIME_MESSAGE).encoded_content

    async def send_text(
        self,
        to: str,
        body: str,
        subject: str | None = None,
        sender_name: str | None = None,
    ) -> SentMessage:
        raw = self.build_raw_message(to, body, subject, sender_name)
        request = self._api.users().messages().send(userId='me', body={'raw': raw})
        logger.info('Sending email', to=to)
        try:
            result = await asyncio.to_thread(request.execute)
        except HttpError as e:
            raise MessagingError(e.reason or str(e)) from e
        return SentMessage(msg_id=result.get('id'), status='sent')
