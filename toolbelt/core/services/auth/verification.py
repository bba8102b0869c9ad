"""Bearer-token verification for incoming requests."""

from collections.abc import Mapping

import jwt

from toolbelt.core.configs import app_config
from toolbelt.core.services.auth.schemas import JwtVerification


def verify_jwt(authorization_header: str | None, secret: str | None = None) -> JwtVerification:
    """Verify a `Bearer <token>` header value against `JWT_SECRET`.

    Expired and malformed tokens are reported separately so callers can
    tell a stale client from a broken one.
    """
    secret = secret or app_config.JWT_SECRET
    if not secret or not authorization_header:
        return JwtVerification(valid=False, error='missing')

    parts = authorization_header.split(' ')
    token = parts[1] if len(parts) > 1 else ''
    if not token:
        return JwtVerification(valid=False, error='malformed')

    try:
        payload = jwt.decode(token, secret, algorithms=app_config.JWT_ALGORITHMS)
    except jwt.ExpiredSignatureError:
        return JwtVerification(valid=False, error='expired')
    except jwt.InvalidSignatureError:
        return JwtVerification(valid=False, error='invalid')
    except jwt.DecodeError:
        return JwtVerification(valid=False, error='malformed')
    except jwt.InvalidTokenError:
        return JwtVerification(valid=False, error='invalid')
    return JwtVerification(valid=True, payload=payload)


def verify_request_headers(headers: Mapping[str, str]) -> bool:
    """Check the Authorization header of a request (either capitalization)."""
    header = headers.get('authorization') or headers.get('Authorization')
    return verify_jwt(header if isinstance(header, str) else None).valid
