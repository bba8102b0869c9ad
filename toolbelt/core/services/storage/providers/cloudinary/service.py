"""Cloudinary storage service (signed REST uploads)."""

import hashlib
import time
from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.storage.base_service import StorageServiceInterface
from toolbelt.core.services.storage.schemas import StorageFile, StorageProvider, UploadRequest

DEFAULT_FOLDER = 'serverlessUpload'


def sign_params(params: dict[str, Any], api_secret: str) -> str:
    """Cloudinary request signature: SHA-1 of sorted `k=v` pairs plus the secret."""
    to_sign = '&'.join(f'{k}={v}' for k, v in sorted(params.items()) if v is not None and v != '')
    return hashlib.sha1(f'{to_sign}{api_secret}'.encode()).hexdigest()


class CloudinaryStorageService(StorageServiceInterface):
    """Cloudinary storage service implementation."""

    BASE_URL = 'https://api.cloudinary.com/v1_1'

    def __init__(self) -> None:
        if not app_config.CLOUDINARY_CLOUD_NAME:
            raise ValueError('CLOUDINARY_CLOUD_NAME is not defined in environment variables.')
        if not app_config.CLOUDINARY_API_KEY:
            raise ValueError('CLOUDINARY_API_KEY is not defined in environment variables.')
        if not app_config.CLOUDINARY_API_SECRET:
            raise ValueError('CLOUDINARY_API_SECRET is not defined in environment variables.')
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f'{self.BASE_URL}/{app_config.CLOUDINARY_CLOUD_NAME}',
                timeout=120.0,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _signed(self, params: dict[str, Any]) -> dict[str, Any]:
        params = {k: v for k, v in params.items() if v is not None}
        params['timestamp'] = int(time.time())
        params['signature'] = sign_params(params, app_config.CLOUDINARY_API_SECRET or '')
        params['api_key'] = app_config.CLOUDINARY_API_KEY
        return params

    async def upload(self, request: UploadRequest) -> StorageFile:
        """Upload raw bytes, base64 content or a remote URL."""
        if not request.has_content():
            raise ValueError('Missing required fields')

        folder = request.folder or DEFAULT_FOLDER
        form = self._signed(
            {
                'folder': folder,
                'public_id': request.key,
                'overwrite': 'true' if request.overwrite else None,
            }
        )

        files = None
        if request.data is not None:
            content_type = request.content_type or 'application/octet-stream'
            files = {'file': (request.key or 'upload', request.data, content_type)}
        elif request.base64:
            form['file'] = f'data:{request.content_type or "image/jpeg"};base64,{request.base64}'
        else:
            form['file'] = request.url

        client = await self._get_client()
        logger.info('Uploading to Cloudinary', folder=folder, public_id=request.key)
        response = await client.post(f'/{request.resource_type}/upload', data=form, files=files)
        if response.status_code != 200:
            raise Exception(f'Cloudinary API error: {response.text}')

        result = response.json()
        return StorageFile(
            key=result['public_id'],
            url=result.get('secure_url') or result.get('url', ''),
            size_bytes=result.get('bytes'),
            format=result.get('format'),
            width=result.get('width'),
            height=result.get('height'),
            folder=folder,
            provider=StorageProvider.CLOUDINARY,
            raw=result,
        )

    async def delete(self, key: str, resource_type: str = 'image') -> None:
        client = await self._get_client()
        response = await client.post(f'/{resource_type}/destroy', data=self._signed({'public_id': key}))
        if response.status_code != 200:
            raise Exception(f'Cloudinary API error: {response.text}')
        logger.debug('Deleted Cloudinary asset', public_id=key)
