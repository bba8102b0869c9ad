from typing import TYPE_CHECKING

from toolbelt.core.services.geocoding.base_service import GeocodingServiceInterface
from toolbelt.core.services.geocoding.schemas import GeocodingProvider

if TYPE_CHECKING:
    from toolbelt.core.services.geocoding.providers.google.service import GoogleGeocodingService


def get_geocoding_service(
    provider: GeocodingProvider = GeocodingProvider.OPENWEATHER,
) -> GeocodingServiceInterface:
    """Factory function to get a geocoding service instance.

    Args:
        provider: Geocoding provider to use (default: OpenWeather)

    Returns:
        GeocodingServiceInterface implementation
    """
    if provider == GeocodingProvider.OPENWEATHER:
        from toolbelt.core.services.geocoding.providers.openweather.service import OpenWeatherGeocodingService

        return OpenWeatherGeocodingService()
    if provider == GeocodingProvider.GOOGLE:
        from toolbelt.core.services.geocoding.providers.google.service import GoogleGeocodingService

        return GoogleGeocodingService()
    raise ValueError(f'Unsupported geocoding provider: {provider}')


class _GeocodingServiceHolder:
    """Holder for singleton geocoding service instances, one per provider."""

    instances: dict[GeocodingProvider, GeocodingServiceInterface] = {}


def get_geocoder(provider: GeocodingProvider = GeocodingProvider.OPENWEATHER) -> GeocodingServiceInterface:
    """Get the shared geocoding service for a provider (singleton)."""
    if provider not in _GeocodingServiceHolder.instances:
        _GeocodingServiceHolder.instances[provider] = get_geocoding_service(provider)
    return _GeocodingServiceHolder.instances[provider]


def get_google_geocoder() -> 'GoogleGeocodingService':
    """The Google geocoder, which also answers free-form address searches."""
    return get_geocoder(GeocodingProvider.GOOGLE)  # type: ignore[return-value]


async def close_geocoders() -> None:
    for service in _GeocodingServiceHolder.instances.values():
        await service.close()
    _GeocodingServiceHolder.instances.clear()
