from pydantic import Field

from toolbelt.core.services.weather import ForecastDay, WeatherLocation
from toolbelt.core.tools.base import ToolInput, ToolOutput

AMBIGUOUS_LOCATION = 'Provide either city/state, zip code, or lat/lon, not multiple or neither.'

WEATHER_PARAMS = {
    'city': 'City name (optional)',
    'state': 'State code (optional)',
    'country': 'Country code (optional, defaults to US)',
    'zipCode': 'Zip code (optional)',
    'lat': 'Latitude (optional)',
    'lon': 'Longitude (optional)',
}


class WeatherInput(ToolInput):
    """City + state (+ country), zip code, or lat/lon."""

    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State name or code')
    country: str | None = Field(None, description='Country code, US when omitted')
    zip_code: str | None = Field(None, description='Zip code')
    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')

    def to_location(self) -> WeatherLocation:
        return WeatherLocation(
            city=self.city,
            state=self.state,
            country=self.country,
            zip_code=self.zip_code,
            lat=self.lat,
            lon=self.lon,
        )


def require_single_shape(location: WeatherLocation) -> None:
    """Reject locations with no shape, or with coordinates mixed into a named place."""
    if location.is_empty() or location.is_ambiguous():
        raise ValueError(AMBIGUOUS_LOCATION)


class ForecastSummaryOutput(ToolOutput):
    forecast: list[ForecastDay] = Field(default_factory=list, description='Daily forecast')
    description: str = Field('', description='Summary of the whole period')
