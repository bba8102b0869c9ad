from typing import Any

from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

KELVIN_OFFSET = 273.15
SCALE_NAMES = {'metric': 'Celsius', 'imperial': 'Fahrenheit', 'kelvin': 'Kelvin'}


class TemperatureConverter(UnitConverter):
    """Scales are named `metric`, `imperial` and `kelvin`."""

    def describe(self, value: Any, from_unit: str, to_unit: str, converted: int | float) -> str:
        return f'Converted {value}° {SCALE_NAMES[from_unit]} to {converted}° {SCALE_NAMES[to_unit]}.'


temperature_converter = TemperatureConverter(
    'temperature',
    ('metric', 'imperial', 'kelvin'),
    {
        ('metric', 'imperial'): Conversion(lambda v: v * 9 / 5 + 32, '°F'),
        ('imperial', 'metric'): Conversion(lambda v: (v - 32) * 5 / 9, '°C'),
        ('metric', 'kelvin'): Conversion(lambda v: v + KELVIN_OFFSET, 'K'),
        ('kelvin', 'metric'): Conversion(lambda v: v - KELVIN_OFFSET, '°C'),
        ('imperial', 'kelvin'): Conversion(lambda v: (v - 32) * 5 / 9 + KELVIN_OFFSET, 'K'),
        ('kelvin', 'imperial'): Conversion(lambda v: (v - KELVIN_OFFSET) * 9 / 5 + 32, '°F'),
    },
)

ConvertTemperature = ConversionToolDefinition(
    id='convertTemperature',
    name='Temperature Converter',
    description='Convert temperatures between Celsius (metric), Fahrenheit (imperial) and Kelvin.',
    converter=temperature_converter,
    required_params={
        'from': 'Scale to convert from ("metric", "imperial", "kelvin")',
        'to': 'Scale to convert to ("metric", "imperial", "kelvin")',
        'value': 'Temperature to convert (number)',
    },
    demo_body=[{'from': 'metric', 'to': 'imperial', 'value': 25}, {'from': 'kelvin', 'to': 'metric', 'value': 300}],
)

tool_registry.register(ConvertTemperature)
