import base64
from unittest.mock import patch

import pytest

from drishti.utils.helpers import (
    decode_features, encode_features, get_json_body, get_json_object, make_admin_token
)


def test_encode_features():
    assert encode_features(['AC Room', 'WiFi']) == '["AC Room", "WiFi"]'
    assert encode_features(('Locker',)) == '["Locker"]'
    assert encode_features('["already text"]') == '["already text"]'
    assert encode_features(None) is None


def test_decode_features(app):
    with app.app_context():
        assert decode_features('["AC Room", "WiFi"]') == ['AC Room', 'WiFi']
        assert decode_features('{broken') == []
        assert decode_features(None) == []
        assert decode_features(['kept']) == ['kept']


def test_make_admin_token():
    with patch('drishti.utils.helpers.time.time', return_value=1767258000.123):
        token = make_admin_token('admin')
    assert base64.b64decode(token).decode() == 'admin:1767258000123'


@pytest.mark.parametrize('kwargs, body, obj', [
    ({'json': {'a': 1}}, {'a': 1}, {'a': 1}),
    ({'json': [1, 2]}, [1, 2], {}),
    ({'data': 'not json', 'content_type': 'application/json'}, {}, {}),
    ({}, {}, {}),
])
def test_json_body_helpers(app, kwargs, body, obj):
    with app.test_request_context('/api/settings', method='POST', **kwargs):
        assert get_json_body() == body
        assert get_json_object() == obj
