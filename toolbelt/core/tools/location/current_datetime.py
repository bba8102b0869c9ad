"""Local date and time for a place, via the location resolver and timezonefinder."""

from datetime import datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import Field
from timezonefinder import TimezoneFinder

from toolbelt.core.deps import logger
from toolbelt.core.services.location import LocationInput, resolve_location
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolInput, ToolOutput
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.utils import get_state_abbreviation

MISSING_LOCATION = 'Either city/state or zipCode/lat/lon are required'
UNRESOLVED_LOCATION = 'Unable to resolve location from provided data.'
UNKNOWN_TIME = 'Unable to determine the current time for the specified location.'


@lru_cache(maxsize=1)
def get_timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


def human_readable(moment: datetime) -> str:
    """`Monday, June 10, 2024 at 03:04:05 PM`"""
    return f'{moment:%A, %B} {moment.day}, {moment:%Y} at {moment:%I:%M:%S %p}'


class CurrentDateTimeInput(ToolInput):
    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State name or code')
    zip_code: str | None = Field(None, description='Zip code')
    country: str | None = Field(None, description='ISO country code (default US)')
    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')

    def validate_params(self) -> None:
        has_coordinates = self.lat is not None and self.lon is not None
        if not (self.zip_code or (self.city and (self.state or self.country != 'US')) or has_coordinates):
            raise ValueError(MISSING_LOCATION)


class CurrentDateTimeOutput(ToolOutput):
    current_date: str | None = Field(None, description='ISO 8601 local time with offset')
    human_readable_date_time: str | None = Field(None, description='Local time spelled out')
    location: str | None = Field(None, description='Place the time applies to')
    error: str | None = Field(None, description='Set when the time zone could not be determined')


class CurrentDateTimeToolDefinition(ToolDefinition):
    input_class = CurrentDateTimeInput
    output_class = CurrentDateTimeOutput

    async def execute(self, input: CurrentDateTimeInput) -> CurrentDateTimeOutput:  # type: ignore[override]
        country = input.country or 'US'
        state = input.state
        if country.upper() == 'US' and state:
            state = get_state_abbreviation(state)

        city, lat, lon = input.city, input.lat, input.lon
        if input.zip_code or lat is None or lon is None:
            if input.zip_code:
                query = LocationInput(zip_code=input.zip_code)
            else:
                query = LocationInput(city=city, state=state, country=country)
            try:
                resolved = await resolve_location(query)
            except Exception as e:
                logger.warning('Location resolution failed', error=str(e))
                raise ValueError(UNRESOLVED_LOCATION) from e
            city, state, country = resolved.city, resolved.state, resolved.country
            lat, lon = resolved.lat, resolved.lon

        try:
            timezone = get_timezone_finder().timezone_at(lat=lat, lng=lon)
            now = datetime.now(ZoneInfo(timezone))
        except Exception as e:
            logger.warning('Time zone lookup failed', lat=lat, lon=lon, error=str(e))
            return CurrentDateTimeOutput(error=UNKNOWN_TIME)

        return CurrentDateTimeOutput(
            current_date=now.isoformat(),
            human_readable_date_time=human_readable(now),
            location=', '.join(part for part in (city, state, country) if part),
        )


GetCurrentDateTime = CurrentDateTimeToolDefinition(
    id='getCurrentDateTime',
    name='Current Date and Time',
    category=ToolCategory.TIME,
    description='Returns the current local date and time for a city/state, zip code or coordinates.',
    requires_api_key=False,
    required_params={
        'city': 'City name (optional)',
        'state': 'State name or code (optional)',
        'zipCode': 'Zip code (optional)',
        'country': 'Country code (optional, defaults to US)',
        'lat': 'Latitude (optional)',
        'lon': 'Longitude (optional)',
    },
    demo_body={'city': 'Austin', 'state': 'Texas'},
    demo_response={
        'currentDate': '2024-06-10T15:04:05.123456-05:00',
        'humanReadableDateTime': 'Monday, June 10, 2024 at 03:04:05 PM',
        'location': 'Austin, TX, US',
    },
)

tool_registry.register(GetCurrentDateTime)
