"""Tests for LocationResolver with a mocked geocoder and cache."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from toolbelt.core.services.database import DocumentCache
from toolbelt.core.services.geocoding import GeocodingError, GeocodingServiceInterface, GeoPlace
from toolbelt.core.services.location import INVALID_LOCATION_SHAPE, LocationInput, LocationResolver


@pytest.fixture
def cache():
    cache = MagicMock(spec=DocumentCache)
    cache.find = AsyncMock(return_value=None)
    cache.upsert = AsyncMock()
    return cache


@pytest.fixture
def geocoder():
    geocoder = MagicMock(spec=GeocodingServiceInterface)
    geocoder.geocode_address = AsyncMock(
        return_value=GeoPlace(lat=42.201, lon=-85.5806, city='Portage', state='Michigan', country='US')
    )
    geocoder.geocode_zip = AsyncMock(return_value=GeoPlace(lat=30.2366, lon=-97.7218, city='Austin', country='US'))
    geocoder.reverse_geocode = AsyncMock(
        return_value=GeoPlace(lat=42.201, lon=-85.5806, city='Portage', state='Michigan', country='US')
    )
    geocoder.lookup_postal_code = AsyncMock(return_value='49002')
    return geocoder


@pytest.fixture
def resolver(geocoder, cache):
    return LocationResolver(geocoder, cache=cache)


class TestInputShape:
    @pytest.mark.asyncio
    async def test_rejects_empty_input(self, resolver, cache):
        with pytest.raises(ValueError, match=INVALID_LOCATION_SHAPE):
            await resolver.resolve(LocationInput())
        cache.find.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_zip_with_coordinates(self, resolver):
        with pytest.raises(ValueError, match=INVALID_LOCATION_SHAPE):
            await resolver.resolve(LocationInput(zip_code='78741', lat=1.0, lon=2.0))

    @pytest.mark.asyncio
    async def test_rejects_city_with_coordinates(self, resolver, geocoder):
        with pytest.raises(ValueError, match=INVALID_LOCATION_SHAPE):
            await resolver.resolve(LocationInput(city='Portage', country='US', lat=9.0, lon=9.0))
        geocoder.geocode_address.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_zip_with_city(self, resolver):
        with pytest.raises(ValueError, match=INVALID_LOCATION_SHAPE):
            await resolver.resolve(LocationInput(zip_code='49002', city='Portage', country='US'))

    @pytest.mark.parametrize(
        'fields',
        [{'city': 'Portage'}, {'country': 'US'}, {'lat': 42.2}],
        ids=['city-only', 'country-only', 'lat-only'],
    )
    def test_rejects_incomplete_shapes(self, fields):
        with pytest.raises(ValueError, match=INVALID_LOCATION_SHAPE):
            LocationInput(**fields).validate_shape()

    def test_state_does_not_count_as_a_shape(self):
        LocationInput(city='Portage', state='MI', country='US').validate_shape()

    def test_numbers_are_coerced_to_text(self):
        location = LocationInput.model_validate({'zipCode': 78741, 'lat': '42.2'})

        assert location.zip_code == '78741'
        assert location.lat == 42.2

    def test_cache_query_uses_supplied_fields_only(self):
        location = LocationInput.model_validate({'city': 'Portage', 'country': 'US'})

        assert location.cache_query() == {'city': 'Portage', 'country': 'US'}


class TestResolve:
    @pytest.mark.asyncio
    async def test_cache_hit_skips_geocoding(self, resolver, geocoder, cache):
        cache.find.return_value = {
            'zipCode': '78741',
            'lat': 30.2366,
            'lon': -97.7218,
            'city': 'Austin',
            'state': 'TX',
            'country': 'US',
            'address': 'Austin, TX, 78741, US',
        }

        resolved = await resolver.resolve(LocationInput(zip_code='78741'))

        assert resolved.city == 'Austin'
        assert resolved.address == 'Austin, TX, 78741, US'
        geocoder.geocode_zip.assert_not_awaited()
        cache.upsert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zip_code(self, resolver, geocoder, cache):
        geocoder.reverse_geocode.return_value = GeoPlace(state='Texas', country='US')

        resolved = await resolver.resolve(LocationInput(zip_code='78741'))

        assert resolved.state == 'TX'
        assert resolved.zip_code == '78741'
        assert resolved.address == 'Austin, TX, 78741, US'
        geocoder.geocode_zip.assert_awaited_once_with('78741')
        cache.upsert.assert_awaited_once_with({'zipCode': '78741'}, resolved.to_document())

    @pytest.mark.asyncio
    async def test_city_and_country(self, resolver, geocoder):
        resolved = await resolver.resolve(LocationInput(city='Portage', state='MI', country='US'))

        assert resolved.zip_code == '49002'
        assert resolved.state == 'MI'
        assert resolved.lat == 42.201
        geocoder.geocode_address.assert_awaited_once_with('Portage', 'US', 'MI')
        geocoder.lookup_postal_code.assert_awaited_once_with(42.201, -85.5806)

    @pytest.mark.asyncio
    async def test_city_keeps_the_requested_name(self, resolver, geocoder):
        geocoder.geocode_address.return_value = GeoPlace(lat=42.2, lon=-85.58, city='Portage Twp', country='US')

        resolved = await resolver.resolve(LocationInput(city='Portage', state='MI', country='US'))

        assert resolved.city == 'Portage'
        assert resolved.address == 'Portage, MI, 49002, US'

    @pytest.mark.asyncio
    async def test_coordinates(self, resolver, cache):
        resolved = await resolver.resolve(LocationInput(lat=42.201, lon=-85.5806))

        assert resolved.address == 'Portage, MI, 49002, US'
        cache.upsert.assert_awaited_once()
        assert cache.upsert.await_args.args[0] == {'lat': 42.201, 'lon': -85.5806}

    @pytest.mark.asyncio
    async def test_non_us_states_are_kept(self, resolver, geocoder):
        geocoder.reverse_geocode.return_value = GeoPlace(city='Toronto', state='Ontario', country='CA')

        resolved = await resolver.resolve(LocationInput(lat=43.65, lon=-79.38))

        assert resolved.state == 'Ontario'

    @pytest.mark.asyncio
    async def test_postal_code_failure_is_not_fatal(self, resolver, geocoder):
        geocoder.lookup_postal_code.side_effect = GeocodingError('quota exceeded')

        resolved = await resolver.resolve(LocationInput(lat=42.201, lon=-85.5806))

        assert resolved.zip_code is None
        assert resolved.address == 'Portage, MI, US'

    @pytest.mark.asyncio
    async def test_upstream_failure_propagates(self, resolver, geocoder, cache):
        geocoder.geocode_zip.side_effect = GeocodingError('Failed to fetch data')

        with pytest.raises(GeocodingError):
            await resolver.resolve(LocationInput(zip_code='00000'))
        cache.upsert.assert_not_awaited()
