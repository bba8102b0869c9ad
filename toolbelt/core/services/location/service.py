"""Location resolution with a persistent cache.

Normalizes the three accepted input shapes into one `ResolvedLocation`.
Records are cached in MongoDB under the exact filter the caller supplied,
so differently-shaped queries for the same place are cached separately.
"""

from toolbelt.core.configs import app_config
from toolbelt.core.deps import logger
from toolbelt.core.services.database import DocumentCache
from toolbelt.core.services.geocoding import (
    GeocodingError,
    GeocodingProvider,
    GeocodingServiceInterface,
    get_geocoder,
)
from toolbelt.core.services.location.schemas import LocationInput, ResolvedLocation
from toolbelt.core.utils import get_state_abbreviation

RESOLVED_LOCATIONS_COLLECTION = 'resolvedLocations'


class LocationResolver:
    """Resolve zip codes, coordinates or city names into canonical records."""

    def __init__(
        self,
        geocoder: GeocodingServiceInterface,
        postal_lookup: GeocodingServiceInterface | None = None,
        cache: DocumentCache | None = None,
    ) -> None:
        self.geocoder = geocoder
        self.postal_lookup = postal_lookup or geocoder
        self.cache = cache or DocumentCache(RESOLVED_LOCATIONS_COLLECTION)

    async def _postal_code(self, lat: float | None, lon: float | None) -> str | None:
        if lat is None or lon is None:
            return None
        try:
            return await self.postal_lookup.lookup_postal_code(lat, lon)
        except GeocodingError as e:
            logger.warning('Postal code lookup failed', lat=lat, lon=lon, error=str(e))
            return None

    async def resolve(self, location: LocationInput) -> ResolvedLocation:
        """Return the cached record or geocode, normalize and cache a new one.

        Raises:
            ValueError: If the input shape is invalid
            GeocodingError: If the upstream lookup fails
        """
        location.validate_shape()
        query = location.cache_query()

        cached = await self.cache.find(query)
        if cached:
            logger.debug('Found existing location data in cache', query=query)
            return ResolvedLocation.model_validate(cached)

        zip_code, lat, lon = location.zip_code, location.lat, location.lon
        city, state, country = location.city, location.state, location.country

        if city and country:
            logger.info('Resolving location by city', city=city, country=country)
            place = await self.geocoder.geocode_address(city, country, state)
            lat, lon, country = place.lat, place.lon, place.country
            zip_code = await self._postal_code(lat, lon)
        elif zip_code:
            logger.info('Resolving location by zip code', zip_code=zip_code)
            place = await self.geocoder.geocode_zip(zip_code)
            city, lat, lon, country = place.city, place.lat, place.lon, place.country
            if lat is not None and lon is not None:
                state = (await self.geocoder.reverse_geocode(lat, lon)).state
        elif lat is not None and lon is not None:
            logger.info('Resolving location by coordinates', lat=lat, lon=lon)
            place = await self.geocoder.reverse_geocode(lat, lon)
            city, state, country = place.city, place.state, place.country
            zip_code = await self._postal_code(lat, lon)
        else:
            raise ValueError('Invalid input: unable to resolve location.')

        if country and country.upper() == 'US' and state:
            state = get_state_abbreviation(state)

        address = ', '.join(str(part) for part in (city, state, zip_code, country) if part)
        resolved = ResolvedLocation(
            zip_code=zip_code,
            lat=lat,
            lon=lon,
            city=city,
            state=state,
            country=country,
            address=address,
        )
        logger.info('Resolved location', address=address)

        await self.cache.upsert(query, resolved.to_document())
        return resolved


class _LocationResolverHolder:
    """Holder for singleton location resolver instance."""

    instance: LocationResolver | None = None


def get_location_resolver() -> LocationResolver:
    """Get the shared resolver (singleton).

    Geocodes with OpenWeather. Postal codes for coordinates come from
    Google when `GOOGLE_API_KEY` is configured.
    """
    if _LocationResolverHolder.instance is None:
        geocoder = get_geocoder(GeocodingProvider.OPENWEATHER)
        postal_lookup = get_geocoder(GeocodingProvider.GOOGLE) if app_config.GOOGLE_API_KEY else geocoder
        _LocationResolverHolder.instance = LocationResolver(geocoder, postal_lookup)
    return _LocationResolverHolder.instance


async def resolve_location(location: LocationInput) -> ResolvedLocation:
    return await get_location_resolver().resolve(location)
