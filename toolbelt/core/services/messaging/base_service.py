from abc import ABC, abstractmethod

from toolbelt.core.services.messaging.schemas import SentMessage


class MessagingServiceInterface(ABC):
    """Interface for outbound text messaging channels."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service.

        Override in implementations that need cleanup.
        """

    @property
    @abstractmethod
    def sender(self) -> str:
        """Address or number messages are sent from."""
        raise NotImplementedError

    @abstractmethod
    async def send_text(
        self,
        to: str,
        body: str,
        subject: str | None = None,
        sender_name: str | None = None,
    ) -> SentMessage:
        """Send a plain text message.

        Args:
            to: Recipient phone number or email address
            body: Message content
            subject: Subject line (email only)
            sender_name: Display name of the sender (email only)

        Returns:
            SentMessage with the upstream message id

        Raises:
            MessagingError: If the channel rejects the message
        """
        raise NotImplementedError
