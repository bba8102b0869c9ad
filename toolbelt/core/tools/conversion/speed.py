"""Speed conversions, including light-years per year for the curious."""

from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

KMH_TO_MPH = 0.621371
MPS_TO_KMH = 3.6
MPS_TO_MPH = 2.23694
KNOTS_TO_KMH = 1.852
KNOTS_TO_MPH = 1.15078
LIGHT_YEAR_KM = 9.461e12
LIGHT_YEAR_MILES = 5.879e12
# One Julian year; the per-hour figures below divide by this value as written
SECONDS_PER_YEAR = 365.25 * 24 * 3600

speed_converter = UnitConverter(
    'speed',
    ('kilometersPerHour', 'milesPerHour', 'metersPerSecond', 'knots', 'lightYearsPerYear'),
    {
        ('kilometersPerHour', 'milesPerHour'): Conversion(lambda v: v * KMH_TO_MPH, 'mph'),
        ('milesPerHour', 'kilometersPerHour'): Conversion(lambda v: v / KMH_TO_MPH, 'km/h'),
        ('lightYearsPerYear', 'kilometersPerHour'): Conversion(lambda v: v * LIGHT_YEAR_KM / SECONDS_PER_YEAR, 'km/h'),
        ('kilometersPerHour', 'lightYearsPerYear'): Conversion(
            lambda v: v / (LIGHT_YEAR_KM / SECONDS_PER_YEAR), 'ly/year', 12
        ),
        ('lightYearsPerYear', 'milesPerHour'): Conversion(lambda v: v * LIGHT_YEAR_MILES / SECONDS_PER_YEAR, 'mph'),
        ('milesPerHour', 'lightYearsPerYear'): Conversion(
            lambda v: v / (LIGHT_YEAR_MILES / SECONDS_PER_YEAR), 'ly/year', 12
        ),
        ('metersPerSecond', 'kilometersPerHour'): Conversion(lambda v: v * MPS_TO_KMH, 'km/h'),
        ('kilometersPerHour', 'metersPerSecond'): Conversion(lambda v: v / MPS_TO_KMH, 'm/s'),
        ('metersPerSecond', 'milesPerHour'): Conversion(lambda v: v * MPS_TO_MPH, 'mph'),
        ('milesPerHour', 'metersPerSecond'): Conversion(lambda v: v / MPS_TO_MPH, 'm/s'),
        ('knots', 'kilometersPerHour'): Conversion(lambda v: v * KNOTS_TO_KMH, 'km/h'),
        ('kilometersPerHour', 'knots'): Conversion(lambda v: v / KNOTS_TO_KMH, 'knots'),
        ('knots', 'milesPerHour'): Conversion(lambda v: v * KNOTS_TO_MPH, 'mph'),
        ('milesPerHour', 'knots'): Conversion(lambda v: v / KNOTS_TO_MPH, 'knots'),
    },
)

ConvertSpeed = ConversionToolDefinition(
    id='convertSpeed',
    name='Speed Converter',
    description='Convert speeds between km/h, mph, m/s, knots and light-years per year.',
    converter=speed_converter,
    required_params={
        'from': (
            'Unit to convert from '
            '("kilometersPerHour", "milesPerHour", "metersPerSecond", "knots", "lightYearsPerYear")'
        ),
        'to': 'Unit to convert to',
        'value': 'Value to convert (number)',
    },
    demo_body=[
        {'from': 'kilometersPerHour', 'to': 'milesPerHour', 'value': 100},
        {'from': 'knots', 'to': 'kilometersPerHour', 'value': 20},
    ],
)

tool_registry.register(ConvertSpeed)
