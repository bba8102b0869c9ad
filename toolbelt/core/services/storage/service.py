"""Storage service factory."""

from toolbelt.core.services.storage.base_service import StorageServiceInterface
from toolbelt.core.services.storage.schemas import StorageProvider


def get_storage_service(provider: StorageProvider = StorageProvider.CLOUDINARY) -> StorageServiceInterface:
    """Get a storage service instance.

    Args:
        provider: Provider to use (default: Cloudinary)

    Returns:
        StorageServiceInterface implementation

    Raises:
        ValueError: If the provider is unsupported or not configured
    """
    if provider == StorageProvider.CLOUDINARY:
        from toolbelt.core.services.storage.providers.cloudinary.service import CloudinaryStorageService

        return CloudinaryStorageService()

    if provider == StorageProvider.GDRIVE:
        from toolbelt.core.services.storage.providers.gdrive.service import GDriveStorageService

        return GDriveStorageService()

    raise ValueError(f'Unsupported storage provider: {provider}')


class _StorageServiceHolder:
    """Holder for singleton storage service instances, one per provider."""

    instances: dict[StorageProvider, StorageServiceInterface] = {}


def get_storage(provider: StorageProvider = StorageProvider.CLOUDINARY) -> StorageServiceInterface:
    """Get the shared storage service for a provider (singleton)."""
    if provider not in _StorageServiceHolder.instances:
        _StorageServiceHolder.instances[provider] = get_storage_service(provider)
    return _StorageServiceHolder.instances[provider]
