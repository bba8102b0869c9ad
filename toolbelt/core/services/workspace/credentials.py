import json
from typing import Any

from google.oauth2 import service_account

from toolbelt.core.configs import app_config


def load_service_account_info() -> dict[str, Any]:
    """Parse GDRIVE_SERVICE_ACCOUNT_JSON.

    Raises:
        ValueError: If the variable is unset or not valid JSON
    """
    raw = app_config.GDRIVE_SERVICE_ACCOUNT_JSON
    if not raw:
        raise ValueError('Google service account configuration is required')
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError('Invalid JSON in GDRIVE_SERVICE_ACCOUNT_JSON') from e


def load_service_account_credentials(
    scopes: list[str],
    subject: str | None = None,
) -> service_account.Credentials:
    """Service account credentials, optionally impersonating `subject`."""
    credentials = service_account.Credentials.from_service_account_info(load_service_account_info(), scopes=scopes)
    if subject:
        credentials = credentials.with_subject(subject)
    return credentials
