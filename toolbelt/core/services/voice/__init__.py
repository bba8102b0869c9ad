from toolbelt.core.services.voice.base_service import VoiceServiceInterface
from toolbelt.core.services.voice.schemas import SpeechAudio, SpeechRequest, VoiceProvider
from toolbelt.core.services.voice.service import get_voice, get_voice_service

__all__ = [
    'SpeechAudio',
    'SpeechRequest',
    'VoiceProvider',
    'VoiceServiceInterface',
    'get_voice',
    'get_voice_service',
]
