from abc import ABC, abstractmethod

from toolbelt.core.services.storage.schemas import StorageFile, UploadRequest


class StorageServiceInterface(ABC):
    """Interface for storage services."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service."""

    @abstractmethod
    async def upload(self, request: UploadRequest) -> StorageFile:
        """Upload a file to storage.

        Args:
            request: Upload request with source data and destination info

        Returns:
            StorageFile with the uploaded file's URL and metadata
        """
        raise NotImplementedError

    async def upload_from_url(self, url: str, key: str | None = None, folder: str | None = None) -> StorageFile:
        """Upload a remote file by URL."""
        return await self.upload(UploadRequest(url=url, key=key, folder=folder))

    @abstractmethod
    async def delete(self, key: str, resource_type: str = 'image') -> None:
        """Remove a file from storage."""
        raise NotImplementedError
