"""Tests for the parsePhoneNumber tool."""

import pytest

from toolbelt.core.tools import ToolRequest, tool_registry
from toolbelt.core.tools.location.phone_number import TOO_MANY_REQUESTS, describe_number


class TestDescribeNumber:
    def test_international_number(self):
        result = describe_number('+12133734253')

        assert result['country'] == 'US'
        assert result['number'] == '+12133734253'
        assert result['isValid'] is True
        assert result['isPossible'] is True
        assert result['internationalFormat'] == '+1 213-373-4253'
        assert result['nationalFormat'] == '(213) 373-4253'
        assert result['uri'] == 'tel:+12133734253'
        assert 'validationError' not in result

    def test_national_number_with_country(self):
        result = describe_number('8 (800) 555-35-35', 'ru')

        assert result['number'] == '+78005553535'
        assert result['country'] == 'RU'

    def test_not_a_number(self):
        result = describe_number('hello')

        assert result == {'number': 'hello', 'isValid': False, 'isPossible': False, 'validationError': 'NOT_A_NUMBER'}

    def test_missing_country_for_national_number(self):
        result = describe_number('2133734253')

        assert result['isValid'] is False
        assert result['validationError'] == 'INVALID_COUNTRY'

    def test_too_short(self):
        result = describe_number('+1 213', None)

        assert result['isValid'] is False
        assert result['validationError'] == 'TOO_SHORT'


class TestParsePhoneNumberTool:
    @pytest.mark.asyncio
    async def test_list_body(self, post_request):
        tool = tool_registry.get_or_raise('parsePhoneNumber')

        response = await tool.handle(post_request([{'number': '+12133734253'}, {'number': '+442071838750'}]))

        assert response['status'] is True
        assert response['message'] == 'Phone number information retrieved successfully.'
        assert [item['country'] for item in response['data']] == ['US', 'GB']

    @pytest.mark.asyncio
    async def test_numeric_query_values_are_read_as_text(self):
        tool = tool_registry.get_or_raise('parsePhoneNumber')

        response = await tool.handle(ToolRequest(method='GET', query={'number': '12133734253', 'country': 'US'}))

        assert response['data'][0]['number'] == '+12133734253'

    @pytest.mark.asyncio
    async def test_too_many_numbers(self, post_request):
        tool = tool_registry.get_or_raise('parsePhoneNumber')

        response = await tool.handle(post_request([{'number': '+12133734253'}] * 51))

        assert response == {'status': False, 'message': TOO_MANY_REQUESTS, 'data': []}

    @pytest.mark.asyncio
    async def test_invalid_method(self):
        tool = tool_registry.get_or_raise('parsePhoneNumber')

        response = await tool.handle(ToolRequest(method='DELETE'))

        assert response['status'] is False
        assert response['message'] == 'Invalid request method'
