from typing import TYPE_CHECKING

from toolbelt.core.services.weather.base_service import WeatherServiceInterface
from toolbelt.core.services.weather.schemas import WeatherProvider

if TYPE_CHECKING:
    from toolbelt.core.services.weather.providers.visual_crossing.service import VisualCrossingWeatherService


def get_weather_service(provider: WeatherProvider = WeatherProvider.VISUAL_CROSSING) -> WeatherServiceInterface:
    """Factory function to get a weather service instance."""
    if provider == WeatherProvider.VISUAL_CROSSING:
        from toolbelt.core.services.weather.providers.visual_crossing.service import VisualCrossingWeatherService

        return VisualCrossingWeatherService()
    if provider == WeatherProvider.OPENWEATHER:
        from toolbelt.core.services.weather.providers.openweather.service import OpenWeatherForecastService

        return OpenWeatherForecastService()
    raise ValueError(f'Unsupported weather provider: {provider}')


class _WeatherServiceHolder:
    """Holder for singleton weather service instances, one per provider."""

    instances: dict[WeatherProvider, WeatherServiceInterface] = {}


def get_weather(provider: WeatherProvider = WeatherProvider.VISUAL_CROSSING) -> WeatherServiceInterface:
    """Get the shared weather service for a provider (singleton)."""
    if provider not in _WeatherServiceHolder.instances:
        _WeatherServiceHolder.instances[provider] = get_weather_service(provider)
    return _WeatherServiceHolder.instances[provider]


def get_visual_crossing() -> 'VisualCrossingWeatherService':
    """The Visual Crossing service, which also serves current conditions and sun times."""
    return get_weather(WeatherProvider.VISUAL_CROSSING)  # type: ignore[return-value]
