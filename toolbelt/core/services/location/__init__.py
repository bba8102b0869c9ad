from toolbelt.core.services.location.schemas import INVALID_LOCATION_SHAPE, LocationInput, ResolvedLocation
from toolbelt.core.services.location.service import (
    RESOLVED_LOCATIONS_COLLECTION,
    LocationResolver,
    get_location_resolver,
    resolve_location,
)

__all__ = [
    'INVALID_LOCATION_SHAPE',
    'RESOLVED_LOCATIONS_COLLECTION',
    'LocationInput',
    'LocationResolver',
    'ResolvedLocation',
    'get_location_resolver',
    'resolve_location',
]
