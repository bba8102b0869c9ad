from abc import ABC, abstractmethod

from toolbelt.core.services.geocoding.schemas import GeoPlace


class GeocodingServiceInterface(ABC):
    """Interface for geocoding services."""

    async def close(self) -> None:  # noqa: B027
        """Close any resources held by the service."""

    @abstractmethod
    async def geocode_address(self, city: str, country: str, state: str | None = None) -> GeoPlace:
        """Forward geocode a city/state/country triple.

        Raises:
            GeocodingError: If the request fails or nothing matches
        """
        raise NotImplementedError

    @abstractmethod
    async def geocode_zip(self, zip_code: str) -> GeoPlace:
        """Look up a postal code.

        Raises:
            GeocodingError: If the request fails or nothing matches
        """
        raise NotImplementedError

    @abstractmethod
    async def reverse_geocode(self, lat: float, lon: float) -> GeoPlace:
        """Find the place at the given coordinates.

        Raises:
            GeocodingError: If the request fails or nothing matches
        """
        raise NotImplementedError

    @abstractmethod
    async def lookup_postal_code(self, lat: float, lon: float) -> str | None:
        """Postal code at the given coordinates, or None when unknown."""
        raise NotImplementedError
