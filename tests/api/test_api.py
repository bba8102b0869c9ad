"""Tests for the HTTP surface using FastAPI's test client."""

import time
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import jwt
import pytest
from fastapi.testclient import TestClient

from toolbelt.api import app
from toolbelt.core.services.search import SearchError
from toolbelt.core.tools.registry import INVALID_FUNCTION_NAME

SECRET = 'api-test-secret'


@pytest.fixture(scope='module')
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    token = jwt.encode({'sub': 'assistant', 'exp': int(time.time()) + 600}, SECRET, algorithm='HS256')
    with patch('toolbelt.core.services.auth.verification.app_config') as config:
        config.JWT_SECRET = SECRET
        config.JWT_ALGORITHMS = ['HS256']
        yield {'Authorization': f'Bearer {token}'}


class TestToolsHandler:
    def test_options_lists_function_specs(self, client):
        response = client.options('/api/toolsHandler')

        assert response.status_code == 200
        names = {spec['function']['name'] for spec in response.json()['tools']}
        assert {'locationResolver', 'convertLength', 'sendWhatsAppMessage'} <= names

    def test_rejects_missing_token(self, client):
        response = client.post('/api/toolsHandler', json={'functionName': 'convertLength'})

        assert response.status_code == 401
        assert response.json() == {'error': 'Unauthorized'}

    def test_rejects_wrong_secret(self, client, auth_headers):
        token = jwt.encode({'sub': 'x', 'exp': int(time.time()) + 600}, 'other', algorithm='HS256')

        response = client.post(
            '/api/toolsHandler', json={'functionName': 'convertLength'}, headers={'Authorization': f'Bearer {token}'}
        )

        assert response.status_code == 401

    def test_dispatch_is_case_insensitive(self, client, auth_headers):
        body = {'functionName': 'CONVERTLENGTH', 'from': 'meters', 'to': 'feet', 'value': 10}

        response = client.post('/api/toolsHandler', json=body, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()['conversions'][0]['convertedValue'] == 32.81

    def test_unknown_function(self, client, auth_headers):
        response = client.post('/api/toolsHandler', json={'functionName': 'doesNotExist'}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {'error': INVALID_FUNCTION_NAME}

    def test_get_is_rejected(self, client, auth_headers):
        response = client.get('/api/toolsHandler', headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {'error': 'Invalid request method'}


class TestEndpoints:
    def test_options_describes_tool(self, client):
        response = client.options('/api/length')

        assert response.status_code == 200
        assert response.json()['functionName'] == 'convertLength'

    def test_get_uses_query_parameters(self, client):
        response = client.get('/api/temperature', params={'from': 'metric', 'to': 'imperial', 'value': '100'})

        assert response.status_code == 200
        assert response.json()['conversions'][0]['convertedValue'] == 212

    def test_oversized_batch_is_400(self, client):
        body = [{'from': 'acres', 'to': 'hectares', 'value': 1}] * 51

        response = client.post('/api/area', json=body)

        assert response.status_code == 400
        assert response.json()['status'] is False

    def test_phone_number_endpoint(self, client):
        response = client.post('/api/phonenumber', json={'number': '+16502530000'})

        assert response.status_code == 200
        assert response.json()['data'][0]['country'] == 'US'


class TestIpEndpoint:
    @pytest.fixture
    def lookup(self):
        service = MagicMock()
        service.lookup = AsyncMock(side_effect=lambda ip: {'ip': ip, 'city': 'Mountain View'})
        with patch('toolbelt.core.tools.location.ip_lookup.get_ip_lookup', return_value=service):
            yield service

    def test_list_body_gets_one_entry_per_address(self, client, lookup):
        response = client.post('/api/ip', json=[{'ip': '4.2.2.1'}, {'ip': '8.8.8.8'}, {}])

        assert response.status_code == 200
        assert response.json() == {
            'status': True,
            'message': 'IP information retrieved successfully.',
            'data': [
                {'status': True, 'data': {'ip': '4.2.2.1', 'city': 'Mountain View'}},
                {'status': True, 'data': {'ip': '8.8.8.8', 'city': 'Mountain View'}},
                {'status': False, 'message': 'IP address is required'},
            ],
        }

    def test_object_body_is_wrapped_in_a_list(self, client, lookup):
        response = client.get('/api/ip', params={'ip': '8.8.8.8'})

        assert response.json()['data'] == [{'status': True, 'data': {'ip': '8.8.8.8', 'city': 'Mountain View'}}]

    def test_oversized_batch_is_400(self, client, lookup):
        response = client.post('/api/ip', json=[{'ip': '8.8.8.8'}] * 51)

        assert response.status_code == 400
        assert response.json()['data'] == []
        lookup.lookup.assert_not_awaited()

    def test_upstream_failure_is_500(self, client, lookup):
        lookup.lookup.side_effect = httpx.ConnectError('ipapi.co unreachable')

        response = client.post('/api/ip', json={'ip': '8.8.8.8'})

        assert response.status_code == 500
        assert response.json() == {'status': False, 'message': 'Error: ipapi.co unreachable'}


class TestSearchGoogleEndpoint:
    @pytest.fixture
    def search(self):
        service = MagicMock()
        service.serp_search = AsyncMock(return_value={'organic_results': [{'title': 'Veracruz All Natural'}]})
        with patch('toolbelt.core.tools.search.serp_search.get_search', return_value=service):
            yield service

    def test_native_parameters_reach_scaleserp(self, client, search):
        response = client.post('/api/search-google', json={'q': 'tacos', 'gl': 'mx', 'max_page': 2})

        assert response.status_code == 200
        params = search.serp_search.await_args.args[0].to_params()
        assert params['q'] == 'tacos'
        assert params['gl'] == 'mx'
        assert params['max_page'] == '2'
        assert params['num'] == '1'

    def test_single_query_still_returns_a_list(self, client, search):
        response = client.post('/api/search-google', json={'q': 'tacos'})

        assert response.json() == {
            'status': True,
            'message': 'SERP search results retrieved successfully.',
            'data': [{'searchQuery': 'tacos', 'results': {'organic_results': [{'title': 'Veracruz All Natural'}]}}],
        }

    def test_options_lists_native_parameters(self, client):
        body = client.options('/api/search-google').json()

        assert {'q', 'hl', 'gl', 'num', 'max_page'} <= set(body['requiredParams'])

    def test_upstream_failure_is_500(self, client, search):
        search.serp_search.side_effect = SearchError('401 Unauthorized')

        response = client.post('/api/search-google', json={'q': 'tacos'})

        assert response.status_code == 500
        assert response.json() == {
            'status': False,
            'message': 'Error: Failed to retrieve results for query "tacos": 401 Unauthorized',
        }


def test_welcome_page(client):
    response = client.get('/')

    assert response.status_code == 200
    assert 'POST /api/toolsHandler' in response.text


def test_tool_listing(client):
    body = client.get('/api/tools').json()

    assert body['total'] == len(body['tools'])
    assert body['total'] >= 30
