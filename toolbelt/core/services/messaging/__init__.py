from toolbelt.core.services.messaging.base_service import MessagingServiceInterface
from toolbelt.core.services.messaging.schemas import (
    MISSING_CONFIGURATION,
    MessagingError,
    MessagingProvider,
    SentMessage,
    WhatsAppMedia,
)
from toolbelt.core.services.messaging.service import (
    close_messengers,
    get_messaging_service,
    get_messenger,
    get_whatsapp,
)

__all__ = [
    'MISSING_CONFIGURATION',
    'MessagingError',
    'MessagingProvider',
    'MessagingServiceInterface',
    'SentMessage',
    'WhatsAppMedia',
    'close_messengers',
    'get_messaging_service',
    'get_messenger',
    'get_whatsapp',
]
