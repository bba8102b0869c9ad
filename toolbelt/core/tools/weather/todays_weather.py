from typing import Any

from pydantic import Field

from toolbelt.core.services.weather import get_visual_crossing
from toolbelt.core.tools.base import ToolCategory, ToolDefinition, ToolOutput
from toolbelt.core.tools.registry import tool_registry
from toolbelt.core.tools.weather.common import WEATHER_PARAMS, WeatherInput


class TodaysWeatherOutput(ToolOutput):
    location: str | None = Field(None, description='Resolved address')
    current_weather: dict[str, Any] = Field(default_factory=dict, description='Current conditions')


class TodaysWeatherToolDefinition(ToolDefinition):
    input_class = WeatherInput
    output_class = TodaysWeatherOutput

    async def execute(self, input: WeatherInput) -> TodaysWeatherOutput:  # type: ignore[override]
        current = await get_visual_crossing().get_current(input.to_location())
        return TodaysWeatherOutput(location=current['location'], current_weather=current['currentWeather'])


GetTodaysWeather = TodaysWeatherToolDefinition(
    id='getTodaysWeather',
    name="Today's Weather",
    category=ToolCategory.WEATHER,
    description='Current weather conditions with a plain-language description, from Visual Crossing.',
    required_params=WEATHER_PARAMS,
    demo_body={'city': 'Austin', 'state': 'TX'},
    demo_response={
        'location': 'Austin, TX, United States',
        'currentWeather': {
            'temp': 31.2,
            'winddir': 'S',
            'conditions': 'Partially cloudy',
            'sunrise': '6:29 AM',
            'sunset': '8:32 PM',
            'description': 'The current temperature is 31.2°C...',
        },
    },
)

tool_registry.register(GetTodaysWeather)
