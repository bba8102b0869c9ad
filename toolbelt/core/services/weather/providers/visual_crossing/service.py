"""Visual Crossing timeline API."""

import itertools
from datetime import date, datetime
from typing import Any
from urllib.parse import quote
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.weather.base_service import WeatherServiceInterface
from toolbelt.core.services.weather.descriptions import describe_current, describe_day, to_fahrenheit, wind_direction
from toolbelt.core.services.weather.schemas import (
    Forecast,
    ForecastDay,
    SolarDay,
    SolarForecast,
    SolarTime,
    WeatherError,
    WeatherLocation,
)
from toolbelt.core.utils import to_12_hour

CURRENT_FIELDS = (
    'datetime',
    'temp',
    'feelslike',
    'humidity',
    'dew',
    'precip',
    'precipprob',
    'snow',
    'snowdepth',
    'windspeed',
    'pressure',
    'visibility',
    'cloudcover',
    'solarradiation',
    'uvindex',
    'conditions',
)


def _day_of_week(day: dict[str, Any], timezone: str | None) -> str:
    epoch = day.get('datetimeEpoch')
    if epoch is not None and timezone:
        try:
            return datetime.fromtimestamp(epoch, ZoneInfo(timezone)).strftime('%A')
        except ZoneInfoNotFoundError:
            pass
    return date.fromisoformat(day['datetime']).strftime('%A')


class VisualCrossingWeatherService(WeatherServiceInterface):
    """Current conditions, daily forecasts and sun times.

    When several API keys are configured they are used in turn.
    """

    BASE_URL = 'https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline'

    def __init__(self) -> None:
        keys = app_config.visual_crossing_api_keys
        if not keys:
            raise ValueError(
                'VISUAL_CROSSING_WEATHER_API_KEY is not set. Please set it in your environment or .env file.'
            )
        self._keys = itertools.cycle(keys)
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=30.0)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def timeline(self, location: WeatherLocation, include: str | None = None) -> dict[str, Any]:
        """Raw timeline response in metric units."""
        query = location.to_query()
        params = {'unitGroup': 'metric', 'key': next(self._keys), 'contentType': 'json'}
        if include:
            params['include'] = include

        client = await self._get_client()
        logger.info('Fetching Visual Crossing timeline', location=query, include=include)
        try:
            response = await client.get(f'{self.BASE_URL}/{quote(query, safe="")}', params=params)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning('Visual Crossing request failed', location=query, error=str(e))
            raise WeatherError(f'Error fetching weather data: {e}') from e

    async def get_current(self, location: WeatherLocation) -> dict[str, Any]:
        """Current conditions with 12-hour sun times and a description."""
        data = await self.timeline(location)
        current = data.get('currentConditions')
        if not current:
            raise WeatherError('Unable to fetch current weather data')

        weather = {field: current.get(field) for field in CURRENT_FIELDS}
        weather['winddir'] = wind_direction(current.get('winddir'))
        weather['sunrise'] = to_12_hour(current['sunrise']) if current.get('sunrise') else None
        weather['sunset'] = to_12_hour(current['sunset']) if current.get('sunset') else None
        weather['description'] = describe_current(current)
        return {'location': data.get('resolvedAddress'), 'currentWeather': weather}

    async def get_forecast(self, location: WeatherLocation) -> Forecast:
        data = await self.timeline(location, include='days')
        timezone = data.get('timezone')
        days = []
        for day in data.get('days') or []:
            forecast_day = ForecastDay(
                date=day['datetime'],
                day_of_week=_day_of_week(day, timezone),
                max_temp_c=round(day['tempmax']),
                min_temp_c=round(day['tempmin']),
                avg_temp_c=round(day['temp']),
                max_temp_f=to_fahrenheit(day['tempmax']),
                min_temp_f=to_fahrenheit(day['tempmin']),
                avg_temp_f=to_fahrenheit(day['temp']),
                wind_speed=day.get('windspeed'),
                wind_dir=day.get('winddir'),
                precipitation=day.get('precip'),
                humidity=day.get('humidity'),
                conditions=day.get('conditions') or '',
            )
            forecast_day.description = describe_day(forecast_day)
            days.append(forecast_day)
        return Forecast(location=data.get('resolvedAddress') or location.to_query(), forecast=days)

    async def get_solar(self, location: WeatherLocation) -> SolarForecast:
        """Sunrise and sunset for each forecast day."""
        data = await self.timeline(location, include='days')
        timezone = data.get('timezone')
        days = []
        for day in data.get('days') or []:
            sunrise, sunset = day.get('sunrise'), day.get('sunset')
            days.append(
                SolarDay(
                    day_of_week=_day_of_week(day, timezone),
                    date=day['datetime'],
                    sunrise=SolarTime(military=sunrise, standard=to_12_hour(sunrise, with_seconds=True))
                    if sunrise
                    else None,
                    sunset=SolarTime(military=sunset, standard=to_12_hour(sunset, with_seconds=True))
                    if sunset
                    else None,
                )
            )
        return SolarForecast(location=data.get('resolvedAddress') or location.to_query(), forecast=days)
