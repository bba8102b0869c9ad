from toolbelt.core.services.voice.base_service import VoiceServiceInterface
from toolbelt.core.services.voice.schemas import VoiceProvider


def get_voice_service(provider: VoiceProvider = VoiceProvider.AZURE) -> VoiceServiceInterface:
    """Factory function to get a voice service instance.

    Args:
        provider: Voice provider to use (default: Azure)

    Returns:
        VoiceServiceInterface implementation
    """
    if provider == VoiceProvider.AZURE:
        from toolbelt.core.services.voice.providers.azure.service import AzureVoiceService

        return AzureVoiceService()
    if provider == VoiceProvider.OPENAI:
        from toolbelt.core.services.voice.providers.openai.service import OpenAIVoiceService

        return OpenAIVoiceService()
    raise ValueError(f'Unsupported voice provider: {provider}')


class _VoiceServiceHolder:
    """Holder for singleton voice service instances, one per provider."""

    instances: dict[VoiceProvider, VoiceServiceInterface] = {}


def get_voice(provider: VoiceProvider = VoiceProvider.AZURE) -> VoiceServiceInterface:
    """Get the shared voice service for a provider (singleton)."""
    if provider not in _VoiceServiceHolder.instances:
        _VoiceServiceHolder.instances[provider] = get_voice_service(provider)
    return _VoiceServiceHolder.instances[provider]
