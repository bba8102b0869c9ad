from toolbelt.core.tools.conversion.common import Conversion, ConversionToolDefinition, UnitConverter
from toolbelt.core.tools.registry import tool_registry

KILOGRAMS_TO_POUNDS = 2.20462
GRAMS_TO_OUNCES = 0.035274

weight_converter = UnitConverter(
    'weight',
    ('kilograms', 'pounds', 'grams', 'ounces'),
    {
        ('kilograms', 'pounds'): Conversion(lambda v: v * KILOGRAMS_TO_POUNDS, 'lbs'),
        ('pounds', 'kilograms'): Conversion(lambda v: v / KILOGRAMS_TO_POUNDS, 'kg'),
        ('grams', 'ounces'): Conversion(lambda v: v * GRAMS_TO_OUNCES, 'oz'),
        ('ounces', 'grams'): Conversion(lambda v: v / GRAMS_TO_OUNCES, 'g'),
    },
)

ConvertWeight = ConversionToolDefinition(
    id='convertWeight',
    name='Weight Converter',
    description='Convert weights between kilograms, pounds, grams and ounces.',
    converter=weight_converter,
    required_params={
        'from': 'Unit to convert from ("kilograms", "pounds", "grams", "ounces")',
        'to': 'Unit to convert to ("kilograms", "pounds", "grams", "ounces")',
        'value': 'Value to convert (number)',
    },
    demo_body=[{'from': 'kilograms', 'to': 'pounds', 'value': 10}],
)

tool_registry.register(ConvertWeight)
