"""Islamic prayer timings for a day or a week, from Aladhan."""

import datetime as dt

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.location import LocationInput, resolve_location
from toolbelt.core.services.prayer import PrayerTimings, get_prayer_times
from toolbelt.core.tools.base import ApiModel, ToolCategory, ToolDefinition, ToolInput, ToolOutput
from toolbelt.core.tools.registry import tool_registry

PRAYER_PARAMS = {
    'city': 'City name (required unless zipCode or lat/lon is given)',
    'state': 'State (optional)',
    'country': '2-letter ISO 3166 country code (optional, defaults to US)',
    'zipCode': 'Zip code (optional)',
    'lat': 'Latitude (optional)',
    'lon': 'Longitude (optional)',
}


class PrayerPlace(ApiModel):
    city: str
    state: str = ''
    country: str = 'US'


class PrayerTimingsInput(ToolInput):
    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State or region')
    country: str | None = Field(None, description='2-letter ISO 3166 country code')
    zip_code: str | None = Field(None, description='Zip code, used when city is missing')
    lat: float | None = Field(None, description='Latitude, used when city is missing')
    lon: float | None = Field(None, description='Longitude, used when city is missing')

    async def to_place(self) -> PrayerPlace:
        """City, state and country for Aladhan, uppercased.

        Raises:
            ValueError: If no location is given, it cannot be resolved, or the country is not 2 letters
        """
        city, state, country = self.city, self.state, self.country
        if not city:
            if self.zip_code:
                query = LocationInput(zip_code=self.zip_code)
            elif self.lat is not None and self.lon is not None:
                query = LocationInput(lat=self.lat, lon=self.lon)
            else:
                raise ValueError('City or zipCode/lat/lon are required')
            try:
                resolved = await resolve_location(query)
            except Exception as e:
                logger.warning('Prayer timings location resolution failed', error=str(e))
                raise ValueError('Unable to resolve location from zip code or coordinates.') from e
            if not resolved.city:
                raise ValueError('Unable to resolve location from zip code or coordinates.')
            city, state, country = resolved.city, resolved.state, resolved.country or 'US'

        place = PrayerPlace(city=city.upper(), state=(state or '').upper(), country=(country or 'US').upper())
        if len(place.country) != 2:
            raise ValueError('Country must be a 2-digit ISO 3166 code')
        return place


class PrayerTimingsDayInput(PrayerTimingsInput):
    date: str | None = Field(None, description='Date as MM-DD-YYYY, today when omitted')

    def parsed_date(self) -> dt.date:
        if not self.date:
            return dt.date.today()
        try:
            return dt.datetime.strptime(self.date, '%m-%d-%Y').date()
        except ValueError as e:
            raise ValueError('Date must be in MM-DD-YYYY format') from e


class PrayerTimingsWeekOutput(ToolOutput):
    week_timings: list[PrayerTimings] = Field(default_factory=list, description='Seven days of timings')


class PrayerTimingsDayOutput(ToolOutput):
    """Same fields as `PrayerTimings`."""

    date_standard: str
    date_islamic: str
    timezone: str
    source: str
    location: str
    timings: dict[str, str]
    iftar_time: str
    suhoor_time: str


class PrayerTimingsDayToolDefinition(ToolDefinition):
    input_class = PrayerTimingsDayInput
    output_class = PrayerTimingsDayOutput

    async def execute(self, input: PrayerTimingsDayInput) -> PrayerTimingsDayOutput:  # type: ignore[override]
        day = input.parsed_date()
        place = await input.to_place()
        timings = await get_prayer_times().timings_for_day(day, place.city, place.country, place.state)
        return PrayerTimingsDayOutput.model_validate(timings.model_dump())


class PrayerTimingsWeekToolDefinition(ToolDefinition):
    input_class = PrayerTimingsInput
    output_class = PrayerTimingsWeekOutput

    async def execute(self, input: PrayerTimingsInput) -> PrayerTimingsWeekOutput:  # type: ignore[override]
        place = await input.to_place()
        week = await get_prayer_times().timings_for_week(dt.date.today(), place.city, place.country, place.state)
        return PrayerTimingsWeekOutput(week_timings=week)


GetIslamicPrayerTimingsDay = PrayerTimingsDayToolDefinition(
    id='getIslamicPrayerTimingsDay',
    name='Islamic Prayer Timings (Day)',
    category=ToolCategory.WEATHER,
    description='Prayer timings for one day, including Iftar and Suhoor times.',
    requires_api_key=False,
    required_params={**PRAYER_PARAMS, 'date': 'Date as MM-DD-YYYY (optional, defaults to today)'},
    demo_body={'city': 'Dearborn', 'state': 'MI', 'country': 'US', 'date': '03-15-2025'},
)

GetIslamicPrayerTimingsWeek = PrayerTimingsWeekToolDefinition(
    id='getIslamicPrayerTimingsWeek',
    name='Islamic Prayer Timings (Week)',
    category=ToolCategory.WEATHER,
    description='Prayer timings for the next seven days starting today.',
    requires_api_key=False,
    required_params=PRAYER_PARAMS,
    demo_body={'zipCode': '48126'},
)

tool_registry.register(GetIslamicPrayerTimingsDay)
tool_registry.register(GetIslamicPrayerTimingsWeek)
