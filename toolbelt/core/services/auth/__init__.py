from toolbelt.core.services.auth.verification import verify_jwt, verify_request_headers
from toolbelt.core.services.auth.schemas import JwtVerification, ServiceToken, TokenStorage
from toolbelt.core.services.auth.token_service import ServiceTokenProvider, get_token_provider
from toolbelt.core.services.auth.token_stores import (
    DatabaseTokenStore,
    DiskTokenStore,
    MemoryTokenStore,
    TokenStoreInterface,
    get_token_store,
)

__all__ = [
    'DatabaseTokenStore',
    'DiskTokenStore',
    'JwtVerification',
    'MemoryTokenStore',
    'ServiceToken',
    'ServiceTokenProvider',
    'TokenStorage',
    'TokenStoreInterface',
    'get_token_provider',
    'get_token_store',
    'verify_jwt',
    'verify_request_headers',
]
