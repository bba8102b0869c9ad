from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.geocoding import get_google_geocoder
from toolbelt.core.tools.base import StatusOutput, ToolCategory, ToolDefinition, ToolInput
from toolbelt.core.tools.registry import tool_registry


class GoogleAddressInput(ToolInput):
    address: str | None = Field(None, description='Free-form address to normalize')


class GoogleAddressOutput(StatusOutput):
    formatted_address: str | None = Field(None, description='Address as formatted by Google')


class GoogleAddressResolverToolDefinition(ToolDefinition):
    input_class = GoogleAddressInput
    output_class = GoogleAddressOutput

    async def execute(self, input: GoogleAddressInput) -> GoogleAddressOutput:  # type: ignore[override]
        if not input.address:
            return GoogleAddressOutput(status=False, message='Address is required.')
        try:
            formatted = await get_google_geocoder().format_address(input.address)
        except Exception as e:
            logger.warning('Google address lookup failed', address=input.address, error=str(e))
            return GoogleAddressOutput(status=False, message=f'Error: {e}')

        if not formatted:
            return GoogleAddressOutput(status=False, message='Unable to find the location.')
        return GoogleAddressOutput(status=True, formatted_address=formatted)


GoogleAddressResolver = GoogleAddressResolverToolDefinition(
    id='googleAddressResolver',
    name='Google Address Resolver',
    category=ToolCategory.LOCATION,
    description='Resolves a free-form address into the formatted address Google Geocoding returns.',
    required_params={'address': 'Address to resolve (required)'},
    demo_body={'address': '1600 Amphitheatre Parkway, Mountain View, CA'},
    demo_response={'status': True, 'formattedAddress': '1600 Amphitheatre Pkwy, Mountain View, CA 94043, USA'},
)

tool_registry.register(GoogleAddressResolver)
