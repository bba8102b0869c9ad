from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class StorageProvider(str, Enum):
    """Supported storage providers."""

    CLOUDINARY = 'cloudinary'
    GDRIVE = 'gdrive'


class StorageFile(BaseModel):
    """Represents a file in storage."""

    key: str = Field(description='Provider identifier (Cloudinary public_id, Drive file id)')
    url: str = Field(description='Public URL to access the file')

    # File metadata
    content_type: str | None = Field(None, description='MIME type of the file')
    size_bytes: int | None = Field(None, description='File size in bytes')
    format: str | None = Field(None, description='File extension reported by the provider')
    width: int | None = Field(None, description='Pixel width for images')
    height: int | None = Field(None, description='Pixel height for images')

    # Storage metadata
    folder: str | None = Field(None, description='Folder the file was placed in')
    provider: StorageProvider = Field(description='Storage provider')

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Raw provider response
    raw: dict[str, Any] = Field(default_factory=dict, description='Provider response body')


class UploadRequest(BaseModel):
    """Request to upload a file or data."""

    # Content source (one of these must be provided)
    data: bytes | None = Field(None, description='Raw bytes to upload')
    base64: str | None = Field(None, description='Base64 encoded content')
    url: str | None = Field(None, description='Remote URL for the provider to fetch')

    # Destination
    key: str | None = Field(None, description='Destination name (public_id / file name)')
    folder: str | None = Field(None, description='Destination folder')

    # File metadata
    content_type: str | None = Field(None, description='MIME type')
    resource_type: str = Field('auto', description='Cloudinary resource type: image, video, raw or auto')

    # Options
    public: bool = Field(True, description='Make the file publicly accessible')
    overwrite: bool = Field(True, description='Replace an existing file with the same name')

    def has_content(self) -> bool:
        return bool(self.data or self.base64 or self.url)
