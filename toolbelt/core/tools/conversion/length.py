"""Length conversions between metric and imperial units."""

from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

METERS_TO_FEET = 3.28084
INCHES_TO_CENTIMETERS = 2.54

length_converter = UnitConverter(
    'length',
    ('meters', 'feet', 'inches', 'centimeters'),
    {
        ('meters', 'feet'): Conversion(lambda v: v * METERS_TO_FEET, 'ft'),
        ('feet', 'meters'): Conversion(lambda v: v / METERS_TO_FEET, 'm'),
        ('inches', 'centimeters'): Conversion(lambda v: v * INCHES_TO_CENTIMETERS, 'cm'),
        ('centimeters', 'inches'): Conversion(lambda v: v / INCHES_TO_CENTIMETERS, 'in'),
    },
)

ConvertLength = ConversionToolDefinition(
    id='convertLength',
    name='Length Converter',
    description='Convert lengths between meters, feet, inches and centimeters.',
    converter=length_converter,
    required_params={
        'from': 'Unit to convert from ("meters", "feet", "inches", "centimeters")',
        'to': 'Unit to convert to ("meters", "feet", "inches", "centimeters")',
        'value': 'Value to convert (number)',
    },
    demo_body=[{'from': 'meters', 'to': 'feet', 'value': 10}, {'from': 'inches', 'to': 'centimeters', 'value': 12}],
    demo_response={
        'status': True,
        'message': 'Conversions processed successfully.',
        'conversions': [
            {
                'status': True,
                'from': 'meters',
                'to': 'feet',
                'originalValue': 10,
                'convertedValue': 32.81,
                'stringValue': '32.81 ft',
                'message': 'Converted 10 meters to 32.81 feet.',
            }
        ],
    },
)

tool_registry.register(ConvertLength)
