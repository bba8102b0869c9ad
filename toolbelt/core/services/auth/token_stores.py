import json
from abc import ABC, abstractmethod
from pathlib import Path

from toolbelt.core.services.auth.schemas import ServiceToken, TokenStorage
from toolbelt.core.services.database import DocumentCache

TOKEN_COLLECTION = 'tokenStore'
TOKEN_DOCUMENT_QUERY = {'name': 'tokenStore'}


class TokenStoreInterface(ABC):
    """Interface for service-token persistence."""

    @abstractmethod
    async def load(self) -> ServiceToken:
        """Return the stored token, or an empty one."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, token: ServiceToken) -> None:
        raise NotImplementedError


class DatabaseTokenStore(TokenStoreInterface):
    """Single document `{name: 'tokenStore'}` in the `tokenStore` collection."""

    def __init__(self, cache: DocumentCache | None = None) -> None:
        self.cache = cache or DocumentCache(TOKEN_COLLECTION)

    async def load(self) -> ServiceToken:
        document = await self.cache.find(TOKEN_DOCUMENT_QUERY)
        return ServiceToken.model_validate(document or {})

    async def save(self, token: ServiceToken) -> None:
        await self.cache.upsert(TOKEN_DOCUMENT_QUERY, token.model_dump(by_alias=True))


class DiskTokenStore(TokenStoreInterface):
    """JSON file on local disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    async def load(self) -> ServiceToken:
        if not self.path.exists():
            return ServiceToken()
        return ServiceToken.model_validate(json.loads(self.path.read_text(encoding='utf-8')))

    async def save(self, token: ServiceToken) -> None:
        self.path.write_text(token.model_dump_json(by_alias=True), encoding='utf-8')


class MemoryTokenStore(TokenStoreInterface):
    """Process memory; lost on cold start."""

    def __init__(self) -> None:
        self._token = ServiceToken()

    async def load(self) -> ServiceToken:
        return self._token

    async def save(self, token: ServiceToken) -> None:
        self._token = token


def get_token_store(storage: TokenStorage, file_path: str | Path = 'token.json') -> TokenStoreInterface:
    if storage == TokenStorage.DATABASE:
        return DatabaseTokenStore()
    if storage == TokenStorage.DISK:
        return DiskTokenStore(file_path)
    if storage == TokenStorage.MEMORY:
        return MemoryTokenStore()
    raise ValueError(f'Unsupported token storage: {storage}')
