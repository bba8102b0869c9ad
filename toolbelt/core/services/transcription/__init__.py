from toolbelt.core.services.transcription.base_service import TranscriptionServiceInterface
from toolbelt.core.services.transcription.service import get_transcription_service

__all__ = ['TranscriptionServiceInterface', 'get_transcription_service']
