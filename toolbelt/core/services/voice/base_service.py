from abc import ABC, abstractmethod

from toolbelt.core.services.voice.schemas import SpeechAudio, SpeechRequest


class VoiceServiceInterface(ABC):
    """Interface for text-to-speech services."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service.

        Override in implementations that need cleanup.
        """

    @abstractmethod
    async def synthesize(self, request: SpeechRequest) -> SpeechAudio:
        """Convert text to audio.

        Args:
            request: Text and voice settings

        Returns:
            SpeechAudio with the encoded audio

        Raises:
            RuntimeError: If the provider rejects the request
        """
        raise NotImplementedError
