from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

INVALID_LOCATION_SHAPE = 'Provide either zip code, or lat/lon, or city and country, not multiple or neither.'


class LocationInput(BaseModel):
    """One of: zip code, lat/lon, or city (+ state) + country."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    zip_code: str | None = Field(None, description='Postal code')
    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')
    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State name or code')
    country: str | None = Field(None, description='Country code')

    @field_validator('zip_code', 'city', 'state', 'country', mode='before')
    @classmethod
    def _as_text(cls, value: Any) -> str | None:
        if value is None or value == '':
            return None
        return str(value)

    @field_validator('lat', 'lon', mode='before')
    @classmethod
    def _as_number(cls, value: Any) -> Any:
        if value is None or value == '':
            return None
        return value

    def validate_shape(self) -> None:
        """Reject inputs that carry none, or more than one, of the location shapes.

        Raises:
            ValueError: With the shape error message
        """
        shapes = (
            bool(self.zip_code),
            self.lat is not None and self.lon is not None,
            bool(self.city and self.country),
        )
        if sum(shapes) != 1:
            raise ValueError(INVALID_LOCATION_SHAPE)

    def cache_query(self) -> dict[str, Any]:
        """Exact-match filter built from the fields the caller supplied."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ResolvedLocation(BaseModel):
    """Canonical location record stored in the `resolvedLocations` collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    zip_code: str | None = Field(None, description='Postal code')
    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')
    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State (two-letter code for the US)')
    country: str | None = Field(None, description='ISO country code')
    address: str = Field('', description='Display string "city, state, zip, country"')

    @field_validator('zip_code', mode='before')
    @classmethod
    def _zip_as_text(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
