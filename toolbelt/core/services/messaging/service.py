"""Messaging service factory."""

from typing import TYPE_CHECKING

from toolbelt.core.services.messaging.base_service import MessagingServiceInterface
from toolbelt.core.services.messaging.schemas import MessagingProvider

if TYPE_CHECKING:
    from toolbelt.core.services.messaging.providers.whatsapp.service import WhatsAppService


def get_messaging_service(provider: MessagingProvider) -> MessagingServiceInterface:
    """Get a messaging service instance.

    Raises:
        ValueError: If the provider is unsupported or not configured
    """
    if provider == MessagingProvider.WHATSAPP:
        from toolbelt.core.services.messaging.providers.whatsapp.service import WhatsAppService

        return WhatsAppService()

    if provider == MessagingProvider.TWILIO:
        from toolbelt.core.services.messaging.providers.twilio.service import TwilioSmsService

        return TwilioSmsService()

    if provider == MessagingProvider.GMAIL:
        from toolbelt.core.services.messaging.providers.gmail.service import GmailService

        return GmailService()

    raise ValueError(f'Unsupported messaging provider: {provider}')


class _MessagingServiceHolder:
    """Holder for singleton messaging service instances, one per provider."""

    instances: dict[MessagingProvider, MessagingServiceInterface] = {}


def get_messenger(provider: MessagingProvider) -> MessagingServiceInterface:
    """Get the shared messaging service for a provider (singleton).

    A provider that fails to initialise is not cached, so the next call retries.
    """
    if provider not in _MessagingServiceHolder.instances:
        _MessagingServiceHolder.instances[provider] = get_messaging_service(provider)
    return _MessagingServiceHolder.instances[provider]


async def close_messengers() -> None:
    for service in list(_MessagingServiceHolder.instances.values()):
        await service.close()
    _MessagingServiceHolder.instances.clear()


def get_whatsapp() -> 'WhatsAppService':
    """The WhatsApp service, which also handles locations, audio, read receipts and media."""
    return get_messenger(MessagingProvider.WHATSAPP)  # type: ignore[return-value]
