from enum import Enum

from pydantic import BaseModel, Field


class VoiceProvider(str, Enum):
    """Supported text-to-speech providers."""

    OPENAI = 'openai'
    AZURE = 'azure'


class SpeechRequest(BaseModel):
    """Request for speech synthesis."""

    text: str = Field(..., min_length=1, description='Text to convert to speech')
    voice: str | None = Field(None, description='Provider voice name (provider default when omitted)')
    output_format: str = Field('mp3', description='Audio container to request')


class SpeechAudio(BaseModel):
    """Synthesized audio."""

    data: bytes = Field(description='Audio bytes')
    content_type: str = Field('audio/mpeg', description='MIME type of the audio')
    extension: str = Field('mp3', description='File extension matching the audio format')
