from toolbelt.core.deps import logger
from toolbelt.core.services.weather import WeatherError, WeatherProvider, describe_period, get_weather
from toolbelt.core.tools.base import ToolCategory, ToolDefinition
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.weather.common import WEATHER_PARAMS, ForecastSummaryOutput, WeatherInput

FORECAST_DAYS = 6


class WeeklyForecastToolDefinition(ToolDefinition):
    input_class = WeatherInput
    output_class = ForecastSummaryOutput

    async def execute(self, input: WeatherInput) -> ForecastSummaryOutput:  # type: ignore[override]
        location = input.to_location()
        if location.is_empty():
            raise ValueError('Provide either {city, state, country(optional)}, {zipCode}, or {lat, lon}')

        try:
            forecast = await get_weather(WeatherProvider.OPENWEATHER).get_forecast(location)
        except Exception as e:
            logger.warning('OpenWeather forecast failed, falling back to Visual Crossing', error=str(e))
            forecast = await get_weather(WeatherProvider.VISUAL_CROSSING).get_forecast(location)

        if not forecast.forecast:
            raise WeatherError('Unable to fetch weather data')

        days = forecast.forecast[:FORECAST_DAYS]
        return ForecastSummaryOutput(
            forecast=days,
            description=describe_period(days, "This week's weather will be mostly"),
        )


GetWeeklyForecast = WeeklyForecastToolDefinition(
    id='getWeeklyForecast',
    name='Weekly Forecast',
    category=ToolCategory.WEATHER,
    description='Six-day forecast with a weekly summary. Uses OpenWeather, falling back to Visual Crossing.',
    required_params=WEATHER_PARAMS,
    demo_body={'zipCode': '78741'},
)

tool_registry.register(GetWeeklyForecast)
