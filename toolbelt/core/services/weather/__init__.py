from toolbelt.core.services.weather.base_service import WeatherServiceInterface
from toolbelt.core.services.weather.descriptions import describe_period, wind_direction
from toolbelt.core.services.weather.schemas import (
    MISSING_WEATHER_LOCATION,
    Forecast,
    ForecastDay,
    SolarForecast,
    WeatherError,
    WeatherLocation,
    WeatherProvider,
)
from toolbelt.core.services.weather.service import get_visual_crossing, get_weather, get_weather_service

__all__ = [
    'MISSING_WEATHER_LOCATION',
    'Forecast',
    'ForecastDay',
    'SolarForecast',
    'WeatherError',
    'WeatherLocation',
    'WeatherProvider',
    'WeatherServiceInterface',
    'describe_period',
    'get_visual_crossing',
    'get_weather',
    'get_weather_service',
    'wind_direction',
]
