from toolbelt.core.deps import logger
from toolbelt.core.services.weather import WeatherError, describe_period, get_visual_crossing
from toolbelt.core.tools.base import ToolCategory, ToolDefinition
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.weather.common import WEATHER_PARAMS, ForecastSummaryOutput, WeatherInput


class ExtendedWeatherToolDefinition(ToolDefinition):
    input_class = WeatherInput
    output_class = ForecastSummaryOutput

    async def execute(self, input: WeatherInput) -> ForecastSummaryOutput:  # type: ignore[override]
        location = input.to_location()
        if location.is_empty():
            raise ValueError('Please provide either {city, state, country (optional)}, {zipCode}, or {lat, lon}.')

        try:
            forecast = await get_visual_crossing().get_forecast(location)
        except Exception as e:
            logger.warning('Extended forecast failed', error=str(e))
            raise WeatherError('Error fetching weather data') from e

        if not forecast.forecast:
            raise WeatherError('Unable to retrieve weather forecast data')

        return ForecastSummaryOutput(
            forecast=forecast.forecast,
            description=describe_period(forecast.forecast, 'The weather for the next two weeks will be predominantly'),
        )


GetExtendedWeather = ExtendedWeatherToolDefinition(
    id='getExtendedWeather',
    name='Extended Forecast',
    category=ToolCategory.WEATHER,
    description='Visual Crossing forecast for the next two weeks with a summary of the period.',
    required_params=WEATHER_PARAMS,
    demo_body={'city': 'Portage', 'state': 'MI'},
)

tool_registry.register(GetExtendedWeather)
