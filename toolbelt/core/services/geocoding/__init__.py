from toolbelt.core.services.geocoding.base_service import GeocodingServiceInterface
from toolbelt.core.services.geocoding.schemas import GeocodingError, GeocodingProvider, GeoPlace
from toolbelt.core.services.geocoding.service import (
    close_geocoders,
    get_geocoder,
    get_geocoding_service,
    get_google_geocoder,
)

__all__ = [
    'GeoPlace',
    'GeocodingError',
    'GeocodingProvider',
    'GeocodingServiceInterface',
    'close_geocoders',
    'get_geocoder',
    'get_geocoding_service',
    'get_google_geocoder',
]
