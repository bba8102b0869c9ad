from abc import ABC, abstractmethod


class TranscriptionServiceInterface(ABC):
    """Interface for speech-to-text services."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service."""

    @abstractmethod
    async def transcribe(self, audio: bytes, filename: str = 'audio.mp3') -> str:
        """Transcribe audio bytes into text.

        Args:
            audio: Encoded audio file contents
            filename: Name hinting the audio format to the provider

        Returns:
            The transcript
        """
        raise NotImplementedError
