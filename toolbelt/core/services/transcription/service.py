from toolbelt.core.services.transcription.base_service import TranscriptionServiceInterface


class _TranscriptionServiceHolder:
    """Holder for singleton transcription service instance."""

    instance: TranscriptionServiceInterface | None = None


def get_transcription_service() -> TranscriptionServiceInterface:
    """Get the shared transcription service (singleton, OpenAI Whisper)."""
    if _TranscriptionServiceHolder.instance is None:
        from toolbelt.core.services.transcription.providers.openai.service import OpenAITranscriptionService

        _TranscriptionServiceHolder.instance = OpenAITranscriptionService()
    return _TranscriptionServiceHolder.instance
