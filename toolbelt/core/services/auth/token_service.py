"""Short-lived service token for calling the internal GDrive uploader."""

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.auth.schemas import ServiceToken, TokenStorage
from toolbelt.core.services.auth.token_stores import TokenStoreInterface, get_token_store


class ServiceTokenProvider:
    """Fetch a token from the token service and reuse it until near expiry."""

    def __init__(self, store: TokenStoreInterface, url: str | None = None, api_key: str | None = None) -> None:
        self.store = store
        self.url = url or app_config.TOKEN_SERVICE_URL
        self.api_key = api_key if api_key is not None else (app_config.TRUSTED_API_KEY or '')

    async def fetch_token(self) -> ServiceToken:
        """Request a fresh token.

        Raises:
            RuntimeError: If the token service cannot be reached or refuses
        """
        try:
            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.post(
                    self.url,
                    json={'apiKey': self.api_key},
                    headers={'Content-Type': 'application/json'},
                )
                response.raise_for_status()
                return ServiceToken.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.exception('Error fetching service token')
            raise RuntimeError('Unable to fetch token') from e

    async def get_token(self) -> str:
        token = await self.store.load()
        if token.is_expired():
            token = await self.fetch_token()
            await self.store.save(token)
        return token.token or ''


class _TokenProviderHolder:
    """Holder for singleton token provider instance."""

    instance: ServiceTokenProvider | None = None


def get_token_provider() -> ServiceTokenProvider:
    """Get the shared token provider using the configured storage (singleton)."""
    if _TokenProviderHolder.instance is None:
        store = get_token_store(TokenStorage(app_config.TOKEN_STORAGE), app_config.TOKEN_FILE_PATH)
        _TokenProviderHolder.instance = ServiceTokenProvider(store)
    return _TokenProviderHolder.instance
