"""Multi-location forecasts from a chosen provider."""

import asyncio
from typing import Any

from pydantic import Field

from toolbelt.core.services.weather import Forecast, ForecastDay, WeatherProvider, get_weather
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolOutput, ToolRequest
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.weather.common import AMBIGUOUS_LOCATION, WEATHER_PARAMS, WeatherInput


class ForecastInput(WeatherInput):
    source: WeatherProvider = Field(WeatherProvider.VISUAL_CROSSING, description='"openweather" or "visualweather"')


class ForecastOutput(ToolOutput):
    location: str = Field(..., description='Resolved place name')
    forecast: list[ForecastDay] = Field(default_factory=list, description='Daily forecast')

    @classmethod
    def from_forecast(cls, forecast: Forecast) -> 'ForecastOutput':
        return cls(location=forecast.location, forecast=forecast.forecast)


async def forecast_location(request: ForecastInput) -> ForecastOutput:
    location = request.to_location()
    if location.is_empty():
        raise ValueError(AMBIGUOUS_LOCATION)
    return ForecastOutput.from_forecast(await get_weather(request.source).get_forecast(location))


async def forecast_locations(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Forecast every location concurrently. Any failure fails the request."""
    outputs = await asyncio.gather(*(forecast_location(ForecastInput.model_validate(item)) for item in items))
    return [output.to_response() for output in outputs]


class ForecastToolDefinition(ToolDefinition):
    input_class = ForecastInput
    output_class = ForecastOutput

    async def handle(self, request: ToolRequest) -> Any:
        return await forecast_locations(request.items())

    async def execute(self, input: ForecastInput) -> ForecastOutput:  # type: ignore[override]
        return await forecast_location(input)


GetForecast = ForecastToolDefinition(
    id='getWeatherForecast',
    name='Weather Forecast',
    category=ToolCategory.WEATHER,
    description='Daily forecasts for one or more locations from OpenWeather or Visual Crossing.',
    required_params={**WEATHER_PARAMS, 'source': 'Data source (optional, "openweather" or "visualweather")'},
    demo_body=[{'zipCode': '78741'}, {'lat': 42.201, 'lon': -85.5806, 'source': 'openweather'}],
)

tool_registry.register(GetForecast)
