"""Google geocoding of addresses and zip codes, one or many per request."""

from typing import Any

from pydantic import Field

from toolbelt.core.deps import logger
from toolbelt.core.services.geocoding import GeoPlace, get_google_geocoder
from toolbelt.core.tools.base import MAX_BATCH_SIZE, StatusOutput, ToolCategory, ToolDefinition, ToolInput, ToolRequest
from toolbelt.core.tools.registry import tool_registry

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'
MISSING_ADDRESS = 'Address or zip code is required in the query or body parameters.'


class GeocodeInput(ToolInput):
    address: str | None = Field(None, description='Address to geocode')
    zip_code: str | None = Field(None, description='Zip code to geocode')


class GeocodeOutput(StatusOutput):
    geocodes: list[dict[str, Any]] = Field(default_factory=list, description='One result per request item')


def to_geocode(place: GeoPlace) -> dict[str, Any]:
    return {
        'latitude': place.lat,
        'longitude': place.lon,
        'formattedAddress': place.formatted_address,
        'country': place.country,
        'city': place.city,
        'state': place.state,
        'zipcode': place.zip_code,
        'countryCode': place.country_code,
    }


async def geocode_requests(items: list[dict[str, Any]]) -> GeocodeOutput:
    if len(items) > MAX_BATCH_SIZE:
        return GeocodeOutput.failure(TOO_MANY_REQUESTS, geocodes=[])  # type: ignore[return-value]

    geocoder = get_google_geocoder()
    results: list[dict[str, Any]] = []
    try:
        for item in items:
            request = GeocodeInput.model_validate(item)
            echo = {'address': request.address, 'zipCode': request.zip_code}
            if not request.address and not request.zip_code:
                results.append({'status': False, 'message': MISSING_ADDRESS, **echo})
                continue

            places = await geocoder.search(request.address or request.zip_code or '')
            if not places:
                results.append({'status': False, 'message': 'Unable to find the location.', **echo})
            else:
                results.append({'status': True, 'data': [to_geocode(place) for place in places]})
    except Exception as e:
        logger.exception('Geocoding failed')
        return GeocodeOutput.failure(f'Error: {e}')  # type: ignore[return-value]

    return GeocodeOutput(status=True, message='Geocode requests processed successfully.', geocodes=results)


class GeocodeToolDefinition(ToolDefinition):
    input_class = GeocodeInput
    output_class = GeocodeOutput

    async def handle(self, request: ToolRequest) -> Any:
        return (await geocode_requests(request.items())).to_response()

    async def execute(self, input: GeocodeInput) -> GeocodeOutput:  # type: ignore[override]
        return await geocode_requests([input.model_dump(by_alias=True, exclude_none=True)])


Geocode = GeocodeToolDefinition(
    id='geocodeAddress',
    name='Geocoder',
    category=ToolCategory.LOCATION,
    description='Retrieves geolocation information for addresses or zip codes using the Google Geocoding API.',
    required_params={
        'address': 'The address to geocode (optional)',
        'zipCode': 'The zip code to geocode (optional)',
    },
    demo_body=[{'address': '1600 Amphitheatre Parkway, Mountain View, CA'}, {'zipCode': '94043'}],
    demo_response={
        'status': True,
        'message': 'Geocode requests processed successfully.',
        'geocodes': [
            {
                'status': True,
                'data': [
                    {
                        'latitude': 37.4224764,
                        'longitude': -122.0842499,
                        'formattedAddress': '1600 Amphitheatre Parkway, Mountain View, CA 94043, USA',
                        'country': 'United States',
                        'city': 'Mountain View',
                        'state': 'California',
                        'zipcode': '94043',
                        'countryCode': 'US',
                    }
                ],
            }
        ],
    },
)

tool_registry.register(Geocode)
