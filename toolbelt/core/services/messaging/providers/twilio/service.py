import asyncio

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.messaging.base_service import MessagingServiceInterface
from toolbelt.core.services.messaging.schemas import MISSING_CONFIGURATION, MessagingError, SentMessage

UNDELIVERED_STATUSES = frozenset({'undelivered', 'failed'})


class TwilioSmsService(MessagingServiceInterface):
    """SMS through the Twilio REST client.

    The Twilio SDK is synchronous, so calls run in a worker thread.
    """

    def __init__(self, client: Client | None = None) -> None:
        if not all(
            (value or '').strip()
            for value in (
                app_config.TWILIO_ACCOUNT_SID,
                app_config.TWILIO_AUTH_TOKEN,
                app_config.TWILIO_ASSISTANT_PHONE_NUMBER,
            )
        ):
            raise ValueError(MISSING_CONFIGURATION)
        self._client = client or Client(app_config.TWILIO_ACCOUNT_SID, app_config.TWILIO_AUTH_TOKEN)

    @property
    def sender(self) -> str:
        return app_config.TWILIO_ASSISTANT_PHONE_NUMBER or ''

    async def send_text(
        self,
        to: str,
        body: str,
        subject: str | None = None,
        sender_name: str | None = None,
    ) -> SentMessage:
        logger.info('Sending SMS', to=to)
        try:
            message = await asyncio.to_thread(self._client.messages.create, body=body, from_=self.sender, to=to)
        except TwilioException as e:
            raise MessagingError(getattr(e, 'msg', None) or str(e)) from e
        return SentMessage(msg_id=message.sid, status=message.status)

    @staticmethod
    def is_delivered(message: SentMessage) -> bool:
        """Twilio accepts the request even when the message later fails."""
        return message.status not in UNDELIVERED_STATUSES
