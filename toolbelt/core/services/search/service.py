"""ScaleSERP Google search client."""

from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.search.schemas import (
    DROPPED_RESULT_FIELDS,
    ImageResult,
    SearchError,
    SerpSearchRequest,
    WebSearchRequest,
    WebSearchResult,
)


class ScaleSerpSearchService:
    """Web and image search through api.scaleserp.com."""

    URL = 'https://api.scaleserp.com/search'

    def __init__(self) -> None:
        if not app_config.SCALE_SERP_API_KEY:
            raise ValueError('SCALE_SERP_API_KEY environment variable is not set')
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=60.0)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _search(self, params: dict[str, Any]) -> dict[str, Any]:
        client = await self._get_client()
        logger.info('Searching ScaleSERP', q=params.get('q'), search_type=params.get('search_type'))
        try:
            response = await client.get(self.URL, params={'api_key': app_config.SCALE_SERP_API_KEY, **params})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SearchError(str(e)) from e

    async def web_search(self, request: WebSearchRequest) -> WebSearchResult:
        """Organic results for one query, without pagination bookkeeping."""
        data = await self._search(request.to_params())
        results = [
            {key: value for key, value in result.items() if key not in DROPPED_RESULT_FIELDS}
            for result in data.get('organic_results') or []
        ]
        pages = (data.get('search_metadata') or {}).get('pages') or [{}]
        return WebSearchResult(
            search_query=request.search_term,
            organic_results=results,
            search_url=pages[0].get('engine_url'),
            meta_data_url=pages[0].get('json_url'),
        )

    async def serp_search(self, request: SerpSearchRequest) -> dict[str, Any]:
        """The ScaleSERP response for one query, unmodified."""
        return await self._search(request.to_params())

    async def image_search(self, search_term: str, size: str | None = None) -> list[ImageResult]:
        params = {'q': search_term, 'search_type': 'images'}
        if size:
            params['image_size'] = size
        data = await self._search(params)
        return [
            ImageResult(
                url=result.get('image') or result.get('link'),
                width=result.get('width') or 0,
                height=result.get('height') or 0,
            )
            for result in data.get('image_results') or []
        ]


class _SearchServiceHolder:
    """Holder for singleton search service instance."""

    instance: ScaleSerpSearchService | None = None


def get_search() -> ScaleSerpSearchService:
    """Get the shared search service (singleton)."""
    if _SearchServiceHolder.instance is None:
        _SearchServiceHolder.instance = ScaleSerpSearchService()
    return _SearchServiceHolder.instance
