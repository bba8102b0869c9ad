"""Google Drive uploads through the internal uploader service."""

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.auth import ServiceTokenProvider, get_token_provider
from toolbelt.core.services.storage.base_service import StorageServiceInterface
from toolbelt.core.services.storage.schemas import StorageFile, StorageProvider, UploadRequest


class GDriveStorageService(StorageServiceInterface):
    """Uploads multipart files; the uploader answers with Drive file metadata."""

    def __init__(self, token_provider: ServiceTokenProvider | None = None) -> None:
        self.token_provider = token_provider or get_token_provider()
        self.url = app_config.GDRIVE_UPLOADER_URL

    async def upload(self, request: UploadRequest) -> StorageFile:
        if request.data is None:
            raise ValueError('The GDrive uploader only accepts raw file data.')

        token = await self.token_provider.get_token()
        file_name = request.key or 'upload.bin'
        content_type = request.content_type or 'application/octet-stream'

        logger.info('Uploading file to GDrive', file_name=file_name)
        async with httpx.AsyncClient(timeout=120.0) as client:
            response = await client.post(
                self.url,
                headers={'Authorization': f'Bearer {token}'},
                data={
                    'fileName': file_name,
                    'setPublic': 'true' if request.public else 'false',
                    'reUpload': 'true' if request.overwrite else 'false',
                },
                files={'file': (file_name, request.data, content_type)},
            )
            response.raise_for_status()

        files = response.json().get('files') or []
        if not files:
            raise ValueError('GDrive uploader returned no files.')
        uploaded = files[0]
        return StorageFile(
            key=uploaded.get('id') or file_name,
            url=uploaded.get('downloadUrl', ''),
            content_type=uploaded.get('mimeType', content_type),
            size_bytes=len(request.data),
            provider=StorageProvider.GDRIVE,
            raw=uploaded,
        )

    async def delete(self, key: str, resource_type: str = 'image') -> None:
        raise NotImplementedError('The GDrive uploader does not support deletes.')
