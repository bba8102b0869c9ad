"""Sunrise and sunset times from Visual Crossing."""

import asyncio
from typing import Any

from pydantic import Field

from toolbelt.core.services.weather import SolarForecast, get_visual_crossing
from toolbelt.core.tools.base import MAX_BATCH_SIZE, StatusOutput, ToolCategory, ToolDefinition, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.weather.common import WEATHER_PARAMS, WeatherInput, require_single_shape

TOO_MANY_REQUESTS = 'Too many requests. Please provide 50 or fewer requests in a single call.'


class SolarBatchOutput(StatusOutput):
    data: list[Any] = Field(default_factory=list)


async def solar_for(request: WeatherInput) -> SolarForecast:
    location = request.to_location()
    require_single_shape(location)
    return await get_visual_crossing().get_solar(location)


class SunriseSunsetToolDefinition(ToolDefinition):
    input_class = WeatherInput
    output_class = SolarBatchOutput

    async def handle(self, request: ToolRequest) -> Any:
        items = request.items()
        if len(items) > MAX_BATCH_SIZE:
            return SolarBatchOutput.failure(TOO_MANY_REQUESTS, data=[]).to_response()

        results = await asyncio.gather(*(solar_for(WeatherInput.model_validate(item)) for item in items))
        return [result.model_dump(mode='json', by_alias=True) for result in results]

    async def execute(self, input: WeatherInput) -> SolarBatchOutput:  # type: ignore[override]
        solar = await solar_for(input)
        return SolarBatchOutput(status=True, data=[solar.model_dump(mode='json', by_alias=True)])


GetSunriseSunset = SunriseSunsetToolDefinition(
    id='getSunriseSunset',
    name='Sunrise and Sunset',
    category=ToolCategory.WEATHER,
    description='Sunrise and sunset times, in 24-hour and 12-hour form, for each forecast day.',
    required_params=WEATHER_PARAMS,
    demo_body=[{'city': 'Los Angeles', 'state': 'CA', 'country': 'US'}, {'zipCode': '10001'}],
    demo_response=[
        {
            'location': 'Los Angeles, CA, US',
            'forecast': [
                {
                    'dayOfWeek': 'Monday',
                    'date': '2024-06-10',
                    'sunrise': {'military': '05:42:00', 'standard': '5:42:00 AM'},
                    'sunset': {'military': '20:08:00', 'standard': '8:08:00 PM'},
                }
            ],
        }
    ],
)

tool_registry.register(GetSunriseSunset)
