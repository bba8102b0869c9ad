import json
import re
from collections.abc import Callable
from typing import Annotated, Literal
from urllib.parse import quote_plus

from pydantic import BeforeValidator, computed_field

from toolbelt.core.configs.base_config import BaseConfig


def _is_json(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


# Variables every deployment must provide, with an optional format check.
ENV_RULES: dict[str, re.Pattern[str] | Callable[[str], bool] | None] = {
    'OPENAI_API_KEY': None,
    'OPEN_WEATHER_API_KEY': None,
    'VISUAL_CROSSING_WEATHER_API_KEY': None,
    'DB_USERNAME': None,
    'DB_PASSWORD': None,
    'DB_NAME': None,
    'DB_CLUSTER': None,
    'GDRIVE_SERVICE_ACCOUNT_JSON': _is_json,
    'TRUSTED_API_KEY': None,
    'JWT_SECRET': None,
    'CLOUDINARY_CLOUD_NAME': None,
    'CLOUDINARY_API_KEY': None,
    'CLOUDINARY_API_SECRET': None,
    'AZURE_SPEECH_KEY': None,
    'AZURE_SPEECH_REGION': None,
    'WHATSAPP_GRAPH_API_TOKEN': None,
    'WHATSAPP_GRAPH_API_URL': re.compile(r'^https?://.+'),
    'WHATSAPP_PHONE_ID': re.compile(r'\d+'),
    'WHATSAPP_ASSISTANT_PHONE_NUMBER': re.compile(r'^\+\d{6,}'),
    'TWILIO_ACCOUNT_SID': None,
    'TWILIO_AUTH_TOKEN': None,
    'TWILIO_ASSISTANT_PHONE_NUMBER': re.compile(r'^\+\d{6,}'),
    'GMAIL_MAILER_ASSISTANT_NAME': None,
    'GOOGLE_API_KEY': None,
    'SCALE_SERP_API_KEY': None,
}


class AppConfig(BaseConfig):
    _default_secrets = [
        'OPENAI_API_KEY',
        'DB_PASSWORD',
        'TRUSTED_API_KEY',
        'JWT_SECRET',
        'CLOUDINARY_API_SECRET',
        'AZURE_SPEECH_KEY',
        'WHATSAPP_GRAPH_API_TOKEN',
        'TWILIO_AUTH_TOKEN',
    ]

    ENVIRONMENT: Literal['local', 'staging', 'production', 'testing'] = 'local'
    PROJECT_NAME: str = 'AI Toolbelt Serverless Collection'

    # Logging
    LOG_LEVEL: str = 'DEBUG'
    LOG_HANDLERS: Annotated[list[Literal['stream', 'file']] | str, BeforeValidator(BaseConfig._parse_list)] = ['stream']

    # Request authentication
    JWT_SECRET: str | None = None
    JWT_ALGORITHMS: Annotated[list[str] | str, BeforeValidator(BaseConfig._parse_list)] = ['HS256']

    # Service token used by the GDrive uploader
    TRUSTED_API_KEY: str | None = None
    TOKEN_SERVICE_URL: str = 'https://jwt.aquataze.com/'
    TOKEN_STORAGE: Literal['DATABASE', 'DISK', 'MEMORY'] = 'DATABASE'
    TOKEN_FILE_PATH: str = 'token.json'
    GDRIVE_UPLOADER_URL: str = 'https://gdrive.aquataze.com/'

    # MongoDB
    DB_USERNAME: str | None = None
    DB_PASSWORD: str | None = None
    DB_NAME: str | None = None
    DB_CLUSTER: str | None = None
    DB_CONNECT_ATTEMPTS: int = 5

    @computed_field  # type: ignore[misc]
    @property
    def mongo_uri(self) -> str:
        username = quote_plus(self.DB_USERNAME or '')
        password = quote_plus(self.DB_PASSWORD or '')
        return f'mongodb+srv://{username}:{password}@{self.DB_CLUSTER or ""}/?retryWrites=true&w=majority'

    # Geocoding and weather
    OPEN_WEATHER_API_KEY: str | None = None
    VISUAL_CROSSING_WEATHER_API_KEY: str | None = None
    GOOGLE_API_KEY: str | None = None

    @computed_field  # type: ignore[misc]
    @property
    def open_weather_api_keys(self) -> list[str]:
        """OpenWeather keys, rotated between lookups when more than one is set."""
        return [key.strip() for key in (self.OPEN_WEATHER_API_KEY or '').split(',') if key.strip()]

    @computed_field  # type: ignore[misc]
    @property
    def visual_crossing_api_keys(self) -> list[str]:
        return [key.strip() for key in (self.VISUAL_CROSSING_WEATHER_API_KEY or '').split(',') if key.strip()]

    # Search
    SCALE_SERP_API_KEY: str | None = None

    # AI
    OPENAI_API_KEY: str | None = None
    OPENAI_VISION_MODEL: str = 'gpt-4o'
    OPENAI_TRANSCRIPTION_MODEL: str = 'whisper-1'
    OPENAI_TTS_MODEL: str = 'tts-1'
    OPENAI_TTS_VOICE: str = 'alloy'

    # Azure speech
    AZURE_SPEECH_KEY: str | None = None
    AZURE_SPEECH_REGION: str | None = None
    AZURE_SPEECH_VOICE: str = 'en-US-AvaMultilingualNeural'

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: str | None = None
    CLOUDINARY_API_KEY: str | None = None
    CLOUDINARY_API_SECRET: str | None = None

    # Google Workspace
    GDRIVE_SERVICE_ACCOUNT_JSON: str | None = None
    GMAIL_MAILER_ASSISTANT_NAME: str | None = None
    GMAIL_SENDER_EMAIL: str | None = None

    # WhatsApp Graph API
    WHATSAPP_GRAPH_API_TOKEN: str | None = None
    WHATSAPP_GRAPH_API_URL: str = 'https://graph.facebook.com/v21.0'
    WHATSAPP_PHONE_ID: str | None = None
    WHATSAPP_ASSISTANT_PHONE_NUMBER: str | None = None

    # Twilio
    TWILIO_ACCOUNT_SID: str | None = None
    TWILIO_AUTH_TOKEN: str | None = None
    TWILIO_ASSISTANT_PHONE_NUMBER: str | None = None

    # Browser
    BROWSER_HEADLESS: bool = True

    def validate_environment(self) -> None:
        """Check the deployment rule table.

        Raises:
            ValueError: On the first missing or malformed variable
        """
        for key, rule in ENV_RULES.items():
            value = getattr(self, key, None)
            if not value:
                raise ValueError(f'Missing environment variable: {key}')
            if isinstance(rule, re.Pattern) and not rule.search(value):
                raise ValueError(f'Invalid format for environment variable: {key}')
            if callable(rule) and not isinstance(rule, re.Pattern) and not rule(value):
                raise ValueError(f'Invalid format for environment variable: {key}')


app_config = AppConfig()
