"""OpenWeather 5 day / 3 hour forecast, reduced to one entry per day."""

import itertools
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.location import LocationInput, LocationResolver, get_location_resolver
from toolbelt.core.services.weather.base_service import WeatherServiceInterface
from toolbelt.core.services.weather.descriptions import describe_day
from toolbelt.core.services.weather.schemas import Forecast, ForecastDay, WeatherError, WeatherLocation

KELVIN = 273.15


def _celsius(kelvin: float) -> int:
    return round(kelvin - KELVIN)


def _fahrenheit(kelvin: float) -> int:
    return round((kelvin - KELVIN) * 9 / 5 + 32)


def organize_forecast(data: dict[str, Any]) -> Forecast:
    """Keep the first 3-hour slot of each local calendar day."""
    city = data.get('city') or {}
    offset = timedelta(seconds=city.get('timezone') or 0)
    seen: set[str] = set()
    days = []
    for entry in data.get('list') or []:
        local = datetime.fromtimestamp(entry['dt'], timezone.utc) + offset
        day_key = local.date().isoformat()
        if day_key in seen:
            continue
        seen.add(day_key)

        main = entry.get('main') or {}
        wind = entry.get('wind') or {}
        weather = entry.get('weather') or [{}]
        forecast_day = ForecastDay(
            date=day_key,
            day_of_week=local.strftime('%A'),
            max_temp_c=_celsius(main['temp_max']),
            min_temp_c=_celsius(main['temp_min']),
            avg_temp_c=_celsius(main['temp']),
            max_temp_f=_fahrenheit(main['temp_max']),
            min_temp_f=_fahrenheit(main['temp_min']),
            avg_temp_f=_fahrenheit(main['temp']),
            wind_speed=wind.get('speed'),
            wind_dir=wind.get('deg'),
            precipitation=round((entry.get('pop') or 0) * 100, 2),
            humidity=main.get('humidity'),
            conditions=weather[0].get('main') or '',
        )
        forecast_day.description = describe_day(forecast_day, with_summary=False)
        days.append(forecast_day)

    return Forecast(location=f'{city.get("name")}, {city.get("country")}', forecast=days)


class OpenWeatherForecastService(WeatherServiceInterface):
    """Forecast by zip code or coordinates; city names go through the location resolver."""

    URL = 'https://api.openweathermap.org/data/2.5/forecast'

    def __init__(self, resolver: LocationResolver | None = None) -> None:
        keys = app_config.open_weather_api_keys
        if not keys:
            raise ValueError('OPEN_WEATHER_API_KEY is not set. Please set it in your environment or .env file.')
        self._keys = itertools.cycle(keys)
        self._resolver = resolver
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=30.0)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _params(self, location: WeatherLocation) -> dict[str, Any]:
        if location.zip_code:
            return {'zip': location.zip_code}
        if location.has_coordinates:
            return {'lat': location.lat, 'lon': location.lon}
        if location.city:
            resolver = self._resolver or get_location_resolver()
            resolved = await resolver.resolve(
                LocationInput(city=location.city, state=location.state, country=location.country or 'US')
            )
            if resolved.zip_code:
                return {'zip': resolved.zip_code}
            if resolved.lat is not None and resolved.lon is not None:
                return {'lat': resolved.lat, 'lon': resolved.lon}
        raise ValueError('Zip code or latitude/longitude must be provided.')

    async def get_forecast(self, location: WeatherLocation) -> Forecast:
        params = await self._params(location)
        client = await self._get_client()
        logger.info('Fetching OpenWeather forecast', **params)
        try:
            response = await client.get(self.URL, params={**params, 'appid': next(self._keys)})
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning('OpenWeather forecast request failed', error=str(e))
            raise WeatherError(f'Error fetching weather data: {e}') from e
        return organize_forecast(data)
