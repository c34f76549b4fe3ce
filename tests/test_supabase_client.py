from unittest.mock import MagicMock, patch

import pytest
import requests

from drishti import create_app
from drishti.utils.supabase_client import (
    SupabaseRestClient, UpstreamError, filter_eq, get_rest_client
)


def make_response(status=200, payload=None, content=b'[]', text=''):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.content = content
    response.text = text
    response.json.return_value = payload
    return response


@pytest.fixture
def rest():
    return SupabaseRestClient('https://demo.supabase.co/', 'anon-key', timeout=5)


def test_request_sends_auth_headers_and_url(rest):
    with patch('drishti.utils.supabase_client.requests.request',
               return_value=make_response(payload=[{'id': 1}])) as mocked:
        rows = rest.request('hero_slides?select=*&order=order_num.asc')

    assert rows == [{'id': 1}]
    method, url = mocked.call_args.args
    kwargs = mocked.call_args.kwargs
    assert method == 'GET'
    assert url == 'https://demo.supabase.co/rest/v1/hero_slides?select=*&order=order_num.asc'
    assert kwargs['headers']['apikey'] == 'anon-key'
    assert kwargs['headers']['Authorization'] == 'Bearer anon-key'
    assert kwargs['headers']['Prefer'] == 'return=representation'
    assert kwargs['json'] is None
    assert kwargs['timeout'] == 5


def test_request_merges_header_overrides(rest):
    with patch('drishti.utils.supabase_client.requests.request',
               return_value=make_response(payload=[])) as mocked:
        rest.request('site_settings?on_conflict=key', method='POST', body={'key': 'phone'},
                     headers={'Prefer': 'resolution=merge-duplicates,return=representation'})

    kwargs = mocked.call_args.kwargs
    assert kwargs['headers']['Prefer'] == 'resolution=merge-duplicates,return=representation'
    assert kwargs['headers']['apikey'] == 'anon-key'
    assert kwargs['json'] == {'key': 'phone'}


def test_empty_body_is_an_empty_list(rest):
    with patch('drishti.utils.supabase_client.requests.request',
               return_value=make_response(status=204, content=b'')):
        assert rest.request('hero_slides?id=eq.1', method='DELETE') == []


def test_error_status_raises_upstream_error(rest):
    with patch('drishti.utils.supabase_client.requests.request',
               return_value=make_response(status=404, text='relation does not exist')):
        with pytest.raises(UpstreamError) as excinfo:
            rest.request('missing_table?select=*')

    assert excinfo.value.status_code == 404
    assert str(excinfo.value) == 'Supabase error: 404 - relation does not exist'


def test_transport_failure_raises_upstream_error(rest):
    with patch('drishti.utils.supabase_client.requests.request',
               side_effect=requests.exceptions.ConnectionError('connection refused')):
        with pytest.raises(UpstreamError) as excinfo:
            rest.request('hero_slides?select=*')

    assert excinfo.value.status_code == 0
    assert 'connection refused' in str(excinfo.value)


def test_missing_credentials_are_rejected():
    with pytest.raises(ValueError):
        SupabaseRestClient('', 'key')
    with pytest.raises(ValueError):
        SupabaseRestClient('https://demo.supabase.co', None)


def test_filter_eq_quotes_values():
    assert filter_eq('id', 7) == 'id=eq.7'
    assert filter_eq('username', 'a b&c') == 'username=eq.a%20b%26c'


def test_get_rest_client_is_built_once_per_app():
    flask_app = create_app('testing', {'SUPABASE_TIMEOUT': 3})
    with flask_app.app_context():
        first = get_rest_client()
        assert first is get_rest_client()
    assert first.base_url == 'https://test-project.supabase.co'
    assert first.api_key == 'test-anon-key'
    assert first.timeout == 3
