"""Tests for the unit converter tools."""

import pytest

from toolbelt.core.tools import ToolRequest, tool_registry
from toolbelt.core.tools.conversion.area import area_converter
from toolbelt.core.tools.conversion.common import MISSING_UNITS, TOO_MANY_CONVERSIONS
from toolbelt.core.tools.conversion.length import length_converter
from toolbelt.core.tools.conversion.temperature import temperature_converter


class TestUnitConverter:
    def test_meters_to_feet(self):
        result = length_converter.convert('meters', 'feet', 10)

        assert result['status'] is True
        assert result['convertedValue'] == 32.81
        assert result['stringValue'] == '32.81 ft'
        assert result['message'] == 'Converted 10 meters to 32.81 feet.'

    def test_integral_results_serialize_as_ints(self):
        result = length_converter.convert('inches', 'centimeters', 10)

        assert result['convertedValue'] == 25.4
        assert length_converter.convert('centimeters', 'inches', 25.4)['convertedValue'] == 10
        assert isinstance(length_converter.convert('centimeters', 'inches', 25.4)['convertedValue'], int)

    def test_numeric_strings_are_accepted(self):
        assert area_converter.convert('acres', 'hectares', '2')['convertedValue'] == 0.81

    def test_unknown_unit(self):
        result = length_converter.convert('meters', 'furlongs', 1)

        assert result['status'] is False
        assert result['message'] == MISSING_UNITS
        assert result['originalValue'] == 1

    def test_non_numeric_value(self):
        result = length_converter.convert('meters', 'feet', 'ten')

        assert result['status'] is False
        assert result['message'] == 'Invalid value for length conversion. It should be a number.'

    def test_unsupported_pair_lists_units(self):
        result = length_converter.convert('meters', 'inches', 1)

        assert result['status'] is False
        assert '"meters", "feet", "inches", or "centimeters"' in result['message']

    def test_temperature_message_names_scales(self):
        result = temperature_converter.convert('metric', 'imperial', 100)

        assert result['convertedValue'] == 212
        assert result['message'] == 'Converted 100° Celsius to 212° Fahrenheit.'

    def test_kelvin(self):
        assert temperature_converter.convert('kelvin', 'metric', 0)['convertedValue'] == -273.15


class TestConversionTools:
    @pytest.mark.asyncio
    async def test_list_body(self, post_request):
        tool = tool_registry.get_or_raise('convertLength')

        response = await tool.handle(
            post_request([{'from': 'meters', 'to': 'feet', 'value': 1}, {'from': 'feet', 'to': 'meters', 'value': 1}])
        )

        assert response['status'] is True
        assert response['message'] == 'Conversions processed successfully.'
        assert [c['convertedValue'] for c in response['conversions']] == [3.28, 0.3]

    @pytest.mark.asyncio
    async def test_query_parameters(self):
        tool = tool_registry.get_or_raise('convertWeight')

        query = {'from': 'kilograms', 'to': 'pounds', 'value': '1'}

        response = await tool.handle(ToolRequest(method='GET', query=query))

        assert response['conversions'][0]['status'] is True

    @pytest.mark.asyncio
    async def test_too_many_conversions(self, post_request):
        tool = tool_registry.get_or_raise('convertArea')
        body = [{'from': 'acres', 'to': 'hectares', 'value': 1}] * 51

        response = await tool.handle(post_request(body))

        assert response == {'status': False, 'message': TOO_MANY_CONVERSIONS, 'conversions': []}

    @pytest.mark.parametrize(
        'tool_id',
        ['convertArea', 'convertLength', 'convertSpeed', 'convertTemperature', 'convertVolume', 'convertWeight'],
    )
    def test_converters_are_registered(self, tool_id):
        tool = tool_registry.get_or_raise(tool_id)

        assert tool.describe()['functionName'] == tool_id
        assert tool.requires_api_key is False
