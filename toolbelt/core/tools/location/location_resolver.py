"""Resolve one or more locations into canonical cached records."""

from typing import Any

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.location import LocationInput, ResolvedLocation, resolve_location
from toolbelt.core.tools.base import MAX_BATCH_SIZE, StatusOutput, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry

TOO_MANY_LOCATIONS = 'Too many locations requested. Please provide 50 or fewer locations in a single request.'


class LocationResolverInput(ToolInput):
    zip_code: str | None = Field(None, description='Zip code')
    lat: float | None = Field(None, description='Latitude')
    lon: float | None = Field(None, description='Longitude')
    city: str | None = Field(None, description='City name')
    state: str | None = Field(None, description='State name or code')
    country: str | None = Field(None, description='Country code (required with city)')


class LocationResolverOutput(StatusOutput):
    locations: list[ResolvedLocation] = Field(default_factory=list, description='Resolved locations, in request order')


async def resolve_locations(items: list[dict[str, Any]]) -> LocationResolverOutput:
    """Resolve every item in order; the first failure fails the whole batch."""
    if len(items) > MAX_BATCH_SIZE:
        return LocationResolverOutput.failure(TOO_MANY_LOCATIONS, locations=[])  # type: ignore[return-value]

    locations = []
    try:
        for item in items:
            locations.append(await resolve_location(LocationInput.model_validate(item)))
    except Exception as e:
        logger.warning('Location resolution failed', error=str(e))
        return LocationResolverOutput.failure(f'Error: {e}', locations=[])  # type: ignore[return-value]

    return LocationResolverOutput(status=True, message='Locations resolved successfully.', locations=locations)


class LocationResolverToolDefinition(ToolDefinition):
    input_class = LocationResolverInput
    output_class = LocationResolverOutput

    async def handle(self, request: ToolRequest) -> Any:
        output = await resolve_locations(request.items())
        return output.to_response()

    async def execute(self, input: ToolInput) -> LocationResolverOutput:
        return await resolve_locations([input.model_dump(by_alias=True, exclude_none=True)])


LocationResolver = LocationResolverToolDefinition(
    id='locationResolver',
    name='Location Resolver',
    category=ToolCategory.LOCATION,
    description=(
        'Resolves location details from a zip code, geo-coordinates (lat, lon) or a city and country. '
        'Accepts one location or a list of up to 50.'
    ),
    required_params={
        'zipCode': 'Zip code (optional)',
        'lat': 'Latitude (optional)',
        'lon': 'Longitude (optional)',
        'city': 'City name (optional)',
        'state': 'State code (optional)',
        'country': 'Country code (required if city is provided)',
    },
    demo_body=[
        {'zipCode': '78741'},
        {'lat': 42.201, 'lon': -85.5806},
        {'city': 'Portage', 'state': 'MI', 'country': 'US'},
    ],
    demo_response={
        'status': True,
        'message': 'Locations resolved successfully.',
        'locations': [
            {
                'address': 'Austin, TX, 78741, US',
                'zipCode': '78741',
                'lat': 30.2295,
                'lon': -97.7207,
                'city': 'Austin',
                'state': 'TX',
                'country': 'US',
            }
        ],
    },
)

tool_registry.register(LocationResolver)
