import asyncio
from typing import Any

from pydantic import ConfigDict, Field

from toolbelt.core.deps import logger
from toolbelt.core.services.ip import get_ip_lookup
from toolbelt.core.tools.base import (
    MAX_BATCH_SIZE,
    StatusOutput,
    ToolCategory,
    ToolDefinition,
    ToolInput,
    ToolOutput,
    ToolRequest,
)
from toolbelt.core.tools.registry import tool_registry

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'


class IpLookupInput(ToolInput):
    ip: str | None = Field(None, description='IPv4 or IPv6 address')


class IpInfoOutput(ToolOutput):
    """ipapi.co fields passed through as returned."""

    model_config = ConfigDict(extra='allow')


class IpBatchOutput(StatusOutput):
    data: list[dict[str, Any]] = Field(default_factory=list, description='One entry per requested address')


async def lookup_address(ip: str | None) -> dict[str, Any]:
    if not ip:
        return {'status': False, 'message': 'IP address is required'}
    return {'status': True, 'data': await get_ip_lookup().lookup(ip)}


async def lookup_addresses(items: list[dict[str, Any]]) -> IpBatchOutput:
    """Look up each address concurrently; missing addresses get a per-item failure.

    Upstream failures propagate so the endpoint can answer with a 500.
    """
    if len(items) > MAX_BATCH_SIZE:
        return IpBatchOutput.failure(TOO_MANY_REQUESTS, data=[])  # type: ignore[return-value]

    ips = [IpLookupInput.model_validate(item).ip for item in items]
    results = await asyncio.gather(*(lookup_address(ip) for ip in ips))
    logger.info('Looked up IP addresses', count=len(ips))
    return IpBatchOutput(status=True, message='IP information retrieved successfully.', data=list(results))


async def answer_ip_request(request: ToolRequest) -> dict[str, Any]:
    """`/api/ip` answers objects and lists alike with the batch envelope."""
    return (await lookup_addresses(request.items())).to_response()


class IpAddressLookupToolDefinition(ToolDefinition):
    input_class = IpLookupInput
    output_class = IpInfoOutput

    async def execute(self, input: IpLookupInput) -> IpInfoOutput:  # type: ignore[override]
        info = await get_ip_lookup().lookup(input.ip or '')
        return IpInfoOutput.model_validate(info)


IpAddressLookup = IpAddressLookupToolDefinition(
    id='ipAddressLookup',
    name='IP Address Lookup',
    category=ToolCategory.LOCATION,
    description=(
        'Retrieves geolocation and network information for an IP address, '
        'with a short and a detailed description.'
    ),
    required_params={'ip': 'IP address to look up'},
    demo_body={'ip': '8.8.8.8'},
    demo_response={
        'ip': '8.8.8.8',
        'city': 'Mountain View',
        'region': 'California',
        'country_name': 'United States',
        'description': 'IP 8.8.8.8 is located in Mountain View, California, United States.',
    },
)

tool_registry.register(IpAddressLookup)
