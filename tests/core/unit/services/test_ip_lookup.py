"""Tests for IpLookupService and the ipAddressLookup tool with a mocked cache."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from toolbelt.core.services.database import DocumentCache
from toolbelt.core.services.ip.service import IpLookupService, describe_ip
from toolbelt.core.tools import tool_registry

IPAPI_RESPONSE = {
    'ip': '8.8.8.8',
    'network': '8.8.8.0/24',
    'version': 'IPv4',
    'city': 'Mountain View',
    'region': 'California',
    'region_code': 'CA',
    'country_name': 'United States',
    'country_code_iso3': 'USA',
    'postal': '94043',
    'latitude': 37.42301,
    'longitude': -122.083352,
    'timezone': 'America/Los_Angeles',
    'currency': 'USD',
    'currency_name': 'Dollar',
    'country_calling_code': '+1',
    'org': 'GOOGLE',
    'asn': 'AS15169',
}


@pytest.fixture
def cache():
    cache = MagicMock(spec=DocumentCache)
    cache.find = AsyncMock(return_value=None)
    cache.upsert = AsyncMock()
    return cache


@pytest.fixture
def service(cache):
    service = IpLookupService(cache=cache)
    service._fetch = AsyncMock(side_effect=lambda ip: dict(IPAPI_RESPONSE))
    return service


class TestIpLookupService:
    @pytest.mark.asyncio
    async def test_cache_miss_fetches_describes_and_stores(self, service, cache):
        info = await service.lookup('8.8.8.8')

        service._fetch.assert_awaited_once_with('8.8.8.8')
        assert info['description'] == 'IP 8.8.8.8 is located in Mountain View, California, United States.'
        assert info['detailedDescription'].startswith('IP 8.8.8.8 belongs to the network 8.8.8.0/24.')
        assert 'The ISP is GOOGLE with ASN AS15169.' in info['detailedDescription']
        cache.upsert.assert_awaited_once()
        assert cache.upsert.await_args.args[0] == {'ip': '8.8.8.8'}

    @pytest.mark.asyncio
    async def test_cache_hit_skips_ipapi(self, service, cache):
        cache.find.return_value = {
            '_id': 'abc123',
            **IPAPI_RESPONSE,
            'description': describe_ip(IPAPI_RESPONSE),
        }

        info = await service.lookup('8.8.8.8')

        service._fetch.assert_not_awaited()
        cache.upsert.assert_not_awaited()
        assert info['description'] == describe_ip(IPAPI_RESPONSE)

    @pytest.mark.asyncio
    async def test_strips_internal_and_timezone_fields(self, service, cache):
        cache.find.return_value = {'_id': 'abc123', **IPAPI_RESPONSE}

        info = await service.lookup('8.8.8.8')

        assert '_id' not in info
        assert 'timezone' not in info
        assert info['city'] == 'Mountain View'

    @pytest.mark.asyncio
    async def test_requires_an_address(self, service, cache):
        with pytest.raises(ValueError, match='IP address is required'):
            await service.lookup('')
        cache.find.assert_not_awaited()


class TestIpAddressLookupTool:
    @pytest.mark.asyncio
    async def test_dispatcher_returns_the_record(self, service, post_request):
        tool = tool_registry.get_or_raise('ipAddressLookup')

        with patch('toolbelt.core.tools.location.ip_lookup.get_ip_lookup', return_value=service):
            response = await tool.handle(post_request({'functionName': 'ipAddressLookup', 'ip': '8.8.8.8'}))

        assert response['ip'] == '8.8.8.8'
        assert response['org'] == 'GOOGLE'
        assert 'timezone' not in response
        assert 'functionName' not in response
