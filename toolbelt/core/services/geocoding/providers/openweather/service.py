import itertools
from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.geocoding.base_service import GeocodingServiceInterface
from toolbelt.core.services.geocoding.schemas import GeocodingError, GeoPlace


class OpenWeatherGeocodingService(GeocodingServiceInterface):
    """OpenWeather Geocoding API (direct, zip and reverse lookups).

    When several API keys are configured they are used in turn.
    """

    BASE_URL = 'https://api.openweathermap.org/geo/1.0'

    def __init__(self) -> None:
        keys = app_config.open_weather_api_keys
        if not keys:
            raise ValueError('OPEN_WEATHER_API_KEY is not set. Please set it in your environment or .env file.')
        self._keys = itertools.cycle(keys)
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.BASE_URL, timeout=30.0)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _fetch(self, path: str, params: dict[str, Any]) -> Any:
        client = await self._get_client()
        logger.info('Fetching geocoding data', path=path)
        try:
            response = await client.get(path, params={**params, 'appid': next(self._keys)})
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning('Geocoding request failed', path=path, error=str(e))
            raise GeocodingError(f'Failed to fetch data: {e}') from e

    async def geocode_address(self, city: str, country: str, state: str | None = None) -> GeoPlace:
        q = ','.join(part for part in (city, state, country) if part)
        data = await self._fetch('/direct', {'q': q, 'limit': 1})
        if not data:
            raise GeocodingError('No coordinates found for the given address')
        first = data[0]
        return GeoPlace(
            city=first.get('name'),
            state=first.get('state'),
            lat=first.get('lat'),
            lon=first.get('lon'),
            country=first.get('country'),
            country_code=first.get('country'),
        )

    async def geocode_zip(self, zip_code: str) -> GeoPlace:
        data = await self._fetch('/zip', {'zip': zip_code})
        if not data:
            raise GeocodingError('No coordinates found for the given zip code')
        return GeoPlace(
            city=data.get('name'),
            lat=data.get('lat'),
            lon=data.get('lon'),
            zip_code=zip_code,
            country=data.get('country'),
            country_code=data.get('country'),
        )

    async def reverse_geocode(self, lat: float, lon: float) -> GeoPlace:
        data = await self._fetch('/reverse', {'lat': lat, 'lon': lon, 'limit': 1})
        if not data:
            raise GeocodingError('No address found for the given coordinates')
        first = data[0]
        return GeoPlace(
            city=first.get('name'),
            state=first.get('state'),
            lat=lat,
            lon=lon,
            country=first.get('country'),
            country_code=first.get('country'),
        )

    async def lookup_postal_code(self, lat: float, lon: float) -> str | None:
        # The OpenWeather reverse endpoint carries no postal codes
        return None
