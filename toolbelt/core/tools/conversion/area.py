from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

SQUARE_METERS_TO_SQUARE_FEET = 10.7639
ACRES_TO_HECTARES = 0.404686

area_converter = UnitConverter(
    'area',
    ('squareMeters', 'squareFeet', 'acres', 'hectares'),
    {
        ('squareMeters', 'squareFeet'): Conversion(lambda v: v * SQUARE_METERS_TO_SQUARE_FEET, 'sq ft'),
        ('squareFeet', 'squareMeters'): Conversion(lambda v: v / SQUARE_METERS_TO_SQUARE_FEET, 'sq m'),
        ('acres', 'hectares'): Conversion(lambda v: v * ACRES_TO_HECTARES, 'ha'),
        ('hectares', 'acres'): Conversion(lambda v: v / ACRES_TO_HECTARES, 'acres'),
    },
)

ConvertArea = ConversionToolDefinition(
    id='convertArea',
    name='Area Converter',
    description='Convert areas between square meters, square feet, acres and hectares.',
    converter=area_converter,
    required_params={
        'from': 'Unit to convert from ("squareMeters", "squareFeet", "acres", "hectares")',
        'to': 'Unit to convert to ("squareMeters", "squareFeet", "acres", "hectares")',
        'value': 'Value to convert (number)',
    },
    demo_body=[
        {'from': 'squareMeters', 'to': 'squareFeet', 'value': 100},
        {'from': 'acres', 'to': 'hectares', 'value': 5},
    ],
)

tool_registry.register(ConvertArea)
