"""Tests for the forecast, prayer timings and local time tools with mocked upstreams."""

import datetime as dt
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from toolbelt.core.services.location import LocationInput, ResolvedLocation
from toolbelt.core.services.prayer import PrayerTimings
from toolbelt.core.services.weather import Forecast, ForecastDay, WeatherError, WeatherProvider
from toolbelt.core.tools import tool_registry
from toolbelt.core.tools.location.current_datetime import UNKNOWN_TIME, UNRESOLVED_LOCATION

WEEKLY = 'toolbelt.core.tools.weather.weekly_forecast'
PRAYER = 'toolbelt.core.tools.weather.prayer_timings'
DATETIME = 'toolbelt.core.tools.location.current_datetime'

AUSTIN = ResolvedLocation(
    zip_code='78701',
    lat=30.2672,
    lon=-97.7431,
    city='Austin',
    state='TX',
    country='US',
    address='Austin, TX, 78701, US',
)


def forecast_days(count: int) -> list[ForecastDay]:
    start = dt.date(2024, 6, 10)
    return [
        ForecastDay(
            date=(start + dt.timedelta(days=offset)).isoformat(),
            day_of_week=(start + dt.timedelta(days=offset)).strftime('%A'),
            max_temp_c=30,
            min_temp_c=20,
            avg_temp_c=25,
            max_temp_f=86,
            min_temp_f=68,
            avg_temp_f=77,
            conditions='Clear',
        )
        for offset in range(count)
    ]


class TestWeeklyForecast:
    @pytest.fixture
    def providers(self):
        openweather = MagicMock()
        openweather.get_forecast = AsyncMock(return_value=Forecast(location='Austin', forecast=forecast_days(8)))
        visual_crossing = MagicMock()
        visual_crossing.get_forecast = AsyncMock(return_value=Forecast(location='Austin', forecast=forecast_days(15)))
        services = {WeatherProvider.OPENWEATHER: openweather, WeatherProvider.VISUAL_CROSSING: visual_crossing}
        with patch(f'{WEEKLY}.get_weather', side_effect=services.__getitem__):
            yield services

    @pytest.mark.asyncio
    async def test_keeps_six_days(self, providers, post_request):
        tool = tool_registry.get_or_raise('getWeeklyForecast')

        response = await tool.handle(post_request({'zipCode': '78701'}))

        assert [day['date'] for day in response['forecast']] == [
            '2024-06-10',
            '2024-06-11',
            '2024-06-12',
            '2024-06-13',
            '2024-06-14',
            '2024-06-15',
        ]
        assert response['description'].startswith("This week's weather will be mostly clear.")
        providers[WeatherProvider.VISUAL_CROSSING].get_forecast.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_visual_crossing(self, providers, post_request):
        providers[WeatherProvider.OPENWEATHER].get_forecast.side_effect = WeatherError('401 Invalid API key')
        tool = tool_registry.get_or_raise('getWeeklyForecast')

        response = await tool.handle(post_request({'city': 'Austin', 'state': 'TX'}))

        location = providers[WeatherProvider.VISUAL_CROSSING].get_forecast.await_args.args[0]
        assert location.city == 'Austin'
        assert len(response['forecast']) == 6

    @pytest.mark.asyncio
    async def test_empty_forecast(self, providers, post_request):
        providers[WeatherProvider.OPENWEATHER].get_forecast.return_value = Forecast(location='Austin')
        tool = tool_registry.get_or_raise('getWeeklyForecast')

        with pytest.raises(WeatherError, match='Unable to fetch weather data'):
            await tool.handle(post_request({'zipCode': '78701'}))

    @pytest.mark.asyncio
    async def test_requires_a_location(self, providers, post_request):
        tool = tool_registry.get_or_raise('getWeeklyForecast')

        with pytest.raises(ValueError, match='Provide either'):
            await tool.handle(post_request({}))


class TestPrayerTimings:
    @pytest.fixture
    def timings(self):
        return PrayerTimings(
            date_standard='15 Mar 2025',
            date_islamic='15 Ramadan 1446',
            timezone='America/Detroit',
            source='Aladhan',
            location='DEARBORN, MI, US',
            timings={'Fajr': '06:18 AM', 'Maghrib': '07:49 PM'},
            iftar_time='07:49 PM',
            suhoor_time='06:18 AM',
        )

    @pytest.fixture
    def aladhan(self, timings):
        service = MagicMock()
        service.timings_for_day = AsyncMock(return_value=timings)
        service.timings_for_week = AsyncMock(return_value=[timings] * 7)
        with patch(f'{PRAYER}.get_prayer_times', return_value=service):
            yield service

    @pytest.mark.asyncio
    async def test_day_for_city(self, aladhan, post_request):
        tool = tool_registry.get_or_raise('getIslamicPrayerTimingsDay')

        response = await tool.handle(
            post_request({'city': 'Dearborn', 'state': 'mi', 'country': 'us', 'date': '03-15-2025'})
        )

        aladhan.timings_for_day.assert_awaited_once_with(dt.date(2025, 3, 15), 'DEARBORN', 'US', 'MI')
        assert response['iftarTime'] == '07:49 PM'
        assert response['dateIslamic'] == '15 Ramadan 1446'

    @pytest.mark.asyncio
    async def test_week_resolves_zip_code(self, aladhan, post_request):
        resolve = AsyncMock(return_value=AUSTIN)
        tool = tool_registry.get_or_raise('getIslamicPrayerTimingsWeek')

        with patch(f'{PRAYER}.resolve_location', resolve):
            response = await tool.handle(post_request({'zipCode': '78701'}))

        resolve.assert_awaited_once_with(LocationInput(zip_code='78701'))
        assert aladhan.timings_for_week.await_args.args[1:] == ('AUSTIN', 'US', 'TX')
        assert len(response['weekTimings']) == 7

    @pytest.mark.asyncio
    async def test_bad_date_format(self, aladhan, post_request):
        tool = tool_registry.get_or_raise('getIslamicPrayerTimingsDay')

        with pytest.raises(ValueError, match='MM-DD-YYYY'):
            await tool.handle(post_request({'city': 'Dearborn', 'date': '2025-03-15'}))
        aladhan.timings_for_day.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_country_must_be_two_letters(self, aladhan, post_request):
        tool = tool_registry.get_or_raise('getIslamicPrayerTimingsWeek')

        with pytest.raises(ValueError, match='2-digit ISO 3166'):
            await tool.handle(post_request({'city': 'Dearborn', 'country': 'USA'}))

    @pytest.mark.asyncio
    async def test_unresolvable_zip(self, aladhan, post_request):
        tool = tool_registry.get_or_raise('getIslamicPrayerTimingsWeek')

        with (
            patch(f'{PRAYER}.resolve_location', AsyncMock(side_effect=RuntimeError('geocoder down'))),
            pytest.raises(ValueError, match='Unable to resolve location'),
        ):
            await tool.handle(post_request({'zipCode': '00000'}))


class TestCurrentDateTime:
    @pytest.mark.asyncio
    async def test_coordinates_skip_resolution(self, post_request):
        resolve = AsyncMock()
        tool = tool_registry.get_or_raise('getCurrentDateTime')

        with patch(f'{DATETIME}.resolve_location', resolve):
            response = await tool.handle(post_request({'lat': 30.2672, 'lon': -97.7431}))

        resolve.assert_not_awaited()
        offset = dt.datetime.fromisoformat(response['currentDate']).utcoffset()
        assert offset in (dt.timedelta(hours=-5), dt.timedelta(hours=-6))
        assert ' at ' in response['humanReadableDateTime']

    @pytest.mark.asyncio
    async def test_city_and_state_are_resolved(self, post_request):
        resolve = AsyncMock(return_value=AUSTIN)
        tool = tool_registry.get_or_raise('getCurrentDateTime')

        with patch(f'{DATETIME}.resolve_location', resolve):
            response = await tool.handle(post_request({'city': 'Austin', 'state': 'Texas'}))

        resolve.assert_awaited_once_with(LocationInput(city='Austin', state='TX', country='US'))
        assert response['location'] == 'Austin, TX, US'

    @pytest.mark.asyncio
    async def test_zip_code_is_sent_alone(self, post_request):
        resolve = AsyncMock(return_value=AUSTIN)
        tool = tool_registry.get_or_raise('getCurrentDateTime')

        with patch(f'{DATETIME}.resolve_location', resolve):
            await tool.handle(post_request({'zipCode': '78701', 'city': 'Austin', 'state': 'TX'}))

        resolve.assert_awaited_once_with(LocationInput(zip_code='78701'))

    @pytest.mark.asyncio
    async def test_resolution_failure(self, post_request):
        tool = tool_registry.get_or_raise('getCurrentDateTime')

        with (
            patch(f'{DATETIME}.resolve_location', AsyncMock(side_effect=RuntimeError('geocoder down'))),
            pytest.raises(ValueError, match=UNRESOLVED_LOCATION),
        ):
            await tool.handle(post_request({'zipCode': '78701'}))

    @pytest.mark.asyncio
    async def test_unknown_time_zone(self, post_request):
        finder = MagicMock()
        finder.timezone_at.return_value = None
        tool = tool_registry.get_or_raise('getCurrentDateTime')

        with patch(f'{DATETIME}.get_timezone_finder', return_value=finder):
            response = await tool.handle(post_request({'lat': 0.0, 'lon': 0.0}))

        assert response == {'error': UNKNOWN_TIME}
