from enum import Enum

from pydantic import BaseModel, Field


class GeocodingProvider(str, Enum):
    """Supported geocoding providers."""

    OPENWEATHER = 'openweather'
    GOOGLE = 'google'


class GeocodingError(Exception):
    """Upstream geocoding request failed or returned nothing usable."""


class GeoPlace(BaseModel):
    """A geocoded place. Providers fill what they know."""

    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')
    city: str | None = Field(None, description='City or place name')
    state: str | None = Field(None, description='State, province or region')
    country: str | None = Field(None, description='Country name or ISO code as returned')
    country_code: str | None = Field(None, description='ISO 3166 alpha-2 country code')
    zip_code: str | None = Field(None, description='Postal code')
    formatted_address: str | None = Field(None, description='Provider formatted address')
