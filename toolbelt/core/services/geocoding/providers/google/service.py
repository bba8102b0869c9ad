from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.geocoding.base_service import GeocodingServiceInterface
from toolbelt.core.services.geocoding.schemas import GeocodingError, GeoPlace


def _component(result: dict[str, Any], kind: str, short: bool = False) -> str | None:
    for component in result.get('address_components', []):
        if kind in component.get('types', []):
            return component.get('short_name' if short else 'long_name')
    return None


def _to_place(result: dict[str, Any]) -> GeoPlace:
    location = result.get('geometry', {}).get('location', {})
    return GeoPlace(
        lat=location.get('lat'),
        lon=location.get('lng'),
        city=_component(result, 'locality') or _component(result, 'postal_town'),
        state=_component(result, 'administrative_area_level_1'),
        country=_component(result, 'country'),
        country_code=_component(result, 'country', short=True),
        zip_code=_component(result, 'postal_code'),
        formatted_address=result.get('formatted_address'),
    )


class GoogleGeocodingService(GeocodingServiceInterface):
    """Google Maps Geocoding API."""

    URL = 'https://maps.googleapis.com/maps/api/geocode/json'

    def __init__(self) -> None:
        if not app_config.GOOGLE_API_KEY:
            raise ValueError('GOOGLE_API_KEY is not set. Please set it in your environment or .env file.')
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=30.0)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _results(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        client = await self._get_client()
        try:
            response = await client.get(self.URL, params={**params, 'key': app_config.GOOGLE_API_KEY})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning('Google geocoding request failed', error=str(e))
            raise GeocodingError(f'Failed to fetch data: {e}') from e

        status = data.get('status')
        if status == 'ZERO_RESULTS':
            return []
        if status != 'OK':
            raise GeocodingError(f'Failed to fetch data: {status} {data.get("error_message", "")}'.strip())
        return data.get('results', [])

    async def search(self, address: str) -> list[GeoPlace]:
        """All matches for a free-form address or postal code."""
        return [_to_place(result) for result in await self._results({'address': address})]

    async def format_address(self, address: str) -> str | None:
        places = await self.search(address)
        return places[0].formatted_address if places else None

    async def geocode_address(self, city: str, country: str, state: str | None = None) -> GeoPlace:
        query = ', '.join(part for part in (city, state, country) if part)
        places = await self.search(query)
        if not places:
            raise GeocodingError('No coordinates found for the given address')
        return places[0]

    async def geocode_zip(self, zip_code: str) -> GeoPlace:
        places = await self.search(zip_code)
        if not places:
            raise GeocodingError('No coordinates found for the given zip code')
        return places[0].model_copy(update={'zip_code': zip_code})

    async def reverse_geocode(self, lat: float, lon: float) -> GeoPlace:
        results = await self._results({'latlng': f'{lat},{lon}'})
        if not results:
            raise GeocodingError('No address found for the given coordinates')
        return _to_place(results[0]).model_copy(update={'lat': lat, 'lon': lon})

    async def lookup_postal_code(self, lat: float, lon: float) -> str | None:
        results = await self._results({'latlng': f'{lat},{lon}', 'result_type': 'postal_code'})
        for result in results:
            postal_code = _component(result, 'postal_code')
            if postal_code:
                return postal_code
        return None
