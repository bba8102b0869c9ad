from toolbelt.core.services.storage.base_service import StorageServiceInterface
from toolbelt.core.services.storage.schemas import (
    StorageFile,
    StorageProvider,
    UploadRequest,
)
from toolbelt.core.services.storage.service import get_storage, get_storage_service

__all__ = [
    'StorageFile',
    'StorageProvider',
    'StorageServiceInterface',
    'UploadRequest',
    'get_storage',
    'get_storage_service',
]
