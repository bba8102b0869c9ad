import time
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TOKEN_EXPIRATION_BUFFER_SECONDS = 300


class TokenStorage(str, Enum):
    """Where the service token is kept between requests."""

    DATABASE = 'DATABASE'
    DISK = 'DISK'
    MEMORY = 'MEMORY'


class JwtVerification(BaseModel):
    """Outcome of verifying a bearer token."""

    valid: bool
    error: Literal['missing', 'expired', 'malformed', 'invalid'] | None = None
    payload: dict[str, Any] | None = None


class ServiceToken(BaseModel):
    """Token issued by the token service, stored with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    token: str | None = Field(None, description='Bearer token')
    issued_at: int | None = Field(None, description='Issue time, epoch seconds')
    expires_at: int | None = Field(None, description='Expiry time, epoch seconds')

    def is_expired(self, now: float | None = None) -> bool:
        """True when missing, expired, or within five minutes of expiring."""
        if not self.token or not self.expires_at:
            return True
        current = int(now if now is not None else time.time())
        return current >= self.expires_at - TOKEN_EXPIRATION_BUFFER_SECONDS
