from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MISSING_WEATHER_LOCATION = 'Either city/state, zip code, or lat/lon must be provided'


class WeatherProvider(str, Enum):
    """Supported weather data providers."""

    VISUAL_CROSSING = 'visualweather'
    OPENWEATHER = 'openweather'


class WeatherError(Exception):
    """Weather data could not be fetched or was incomplete."""


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class WeatherLocation(_CamelModel):
    """Where to fetch weather for: city + state, zip code, or lat/lon."""

    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None
    lat: float | None = None
    lon: float | None = None

    @field_validator('city', 'state', 'country', 'zip_code', mode='before')
    @classmethod
    def _as_text(cls, value: Any) -> str | None:
        if value is None or value == '':
            return None
        return str(value)

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None

    def is_empty(self) -> bool:
        return not self.city and not self.state and not self.zip_code and not self.has_coordinates

    def is_ambiguous(self) -> bool:
        """Both a named place and coordinates were given."""
        has_place = bool(self.city or self.state or self.zip_code)
        return has_place and (self.lat is not None or self.lon is not None)

    def to_query(self) -> str:
        """Location string for the Visual Crossing timeline API.

        Raises:
            ValueError: If no usable location is present
        """
        if self.has_coordinates:
            return f'{self.lat},{self.lon}'
        if self.city and self.state:
            return f'{self.city},{self.state},{self.country or "US"}'
        if self.zip_code:
            return self.zip_code
        raise ValueError(MISSING_WEATHER_LOCATION)


class ForecastDay(_CamelModel):
    """One day of a multi-day forecast."""

    date: str
    day_of_week: str
    max_temp_c: float
    min_temp_c: float
    avg_temp_c: float
    max_temp_f: float
    min_temp_f: float
    avg_temp_f: float
    wind_speed: float | None = None
    wind_dir: float | None = None
    precipitation: float | None = None
    humidity: float | None = None
    conditions: str = ''
    description: str = ''


class Forecast(_CamelModel):
    location: str
    forecast: list[ForecastDay] = Field(default_factory=list)


class SolarTime(_CamelModel):
    military: str
    standard: str


class SolarDay(_CamelModel):
    day_of_week: str
    date: str
    sunrise: SolarTime | None = None
    sunset: SolarTime | None = None


class SolarForecast(_CamelModel):
    location: str
    forecast: list[SolarDay] = Field(default_factory=list)
