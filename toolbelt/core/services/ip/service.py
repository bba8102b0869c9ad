"""IP geolocation through ipapi.co, cached in MongoDB."""

from typing import Any

import httpx

from toolbelt.core.deps import logger
from toolbelt.core.services.database import DocumentCache

IP_LOOKUP_COLLECTION = 'ipAddressLookupCache'


def describe_ip(info: dict[str, Any]) -> str:
    return f'IP {info.get("ip")} is located in {info.get("city")}, {info.get("region")}, {info.get("country_name")}.'


def describe_ip_in_detail(info: dict[str, Any]) -> str:
    return (
        f'IP {info.get("ip")} belongs to the network {info.get("network")}. '
        f'It is an {info.get("version")} address located in {info.get("city")}, {info.get("region")} '
        f'({info.get("region_code")}), {info.get("country_name")} ({info.get("country_code_iso3")}). '
        f'The location has the postal code {info.get("postal")} and is situated at latitude '
        f'{info.get("latitude")} and longitude {info.get("longitude")}. '
        f'The currency used is {info.get("currency")} ({info.get("currency_name")}), '
        f'and the calling code is {info.get("country_calling_code")}. '
        f'The ISP is {info.get("org")} with ASN {info.get("asn")}.'
    )


class IpLookupService:
    """Look up an IP address, serving repeats from the cache."""

    URL = 'https://ipapi.co/{ip}/json/'

    def __init__(self, cache: DocumentCache | None = None) -> None:
        self.cache = cache or DocumentCache(IP_LOOKUP_COLLECTION)

    async def _fetch(self, ip: str) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.get(self.URL.format(ip=ip))
            response.raise_for_status()
            return response.json()

    async def lookup(self, ip: str) -> dict[str, Any]:
        """IP details plus `description` and `detailedDescription`.

        Raises:
            ValueError: If no IP is given
            httpx.HTTPError: If ipapi.co fails
        """
        if not ip:
            raise ValueError('IP address is required')

        info = await self.cache.find({'ip': ip})
        if info:
            logger.debug('Found existing IP info in cache', ip=ip)
        else:
            logger.info('Looking up IP address', ip=ip)
            info = await self._fetch(ip)
            info['description'] = describe_ip(info)
            info['detailedDescription'] = describe_ip_in_detail(info)
            await self.cache.upsert({'ip': info.get('ip', ip)}, info)

        info.pop('_id', None)
        info.pop('timezone', None)
        return info


class _IpLookupServiceHolder:
    """Holder for singleton IP lookup service instance."""

    instance: IpLookupService | None = None


def get_ip_lookup() -> IpLookupService:
    if _IpLookupServiceHolder.instance is None:
        _IpLookupServiceHolder.instance = IpLookupService()
    return _IpLookupServiceHolder.instance
