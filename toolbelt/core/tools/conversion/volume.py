from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

LITERS_TO_GALLONS = 0.264172
MILLILITERS_TO_FLUID_OUNCES = 0.033814

volume_converter = UnitConverter(
    'volume',
    ('liters', 'gallons', 'milliliters', 'fluidOunces'),
    {
        ('liters', 'gallons'): Conversion(lambda v: v * LITERS_TO_GALLONS, 'gal'),
        ('gallons', 'liters'): Conversion(lambda v: v / LITERS_TO_GALLONS, 'L'),
        ('milliliters', 'fluidOunces'): Conversion(lambda v: v * MILLILITERS_TO_FLUID_OUNCES, 'fl oz'),
        ('fluidOunces', 'milliliters'): Conversion(lambda v: v / MILLILITERS_TO_FLUID_OUNCES, 'mL'),
    },
)

ConvertVolume = ConversionToolDefinition(
    id='convertVolume',
    name='Volume Converter',
    description='Convert volumes between liters, gallons, milliliters and fluid ounces.',
    converter=volume_converter,
    required_params={
        'from': 'Unit to convert from ("liters", "gallons", "milliliters", "fluidOunces")',
        'to': 'Unit to convert to ("liters", "gallons", "milliliters", "fluidOunces")',
        'value': 'Value to convert (number)',
    },
    demo_body=[{'from': 'liters', 'to': 'gallons', 'value': 10}],
)

tool_registry.register(ConvertVolume)
