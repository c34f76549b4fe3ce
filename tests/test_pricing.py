import json

import pytest

from tests.fake_supabase import FakeSupabaseClient


def test_features_are_stored_as_text_and_read_as_list(client, fake_db):
    response = client.post('/api/pricing', json={
        'name': 'Double Shift', 'price': 900, 'duration': '/month',
        'features': ['8 Hours Daily', 'AC Room'], 'order_num': 2, 'is_popular': True
    })

    assert response.get_json()['features'] == ['8 Hours Daily', 'AC Room']
    stored = fake_db.tables['pricing_plans'][0]['features']
    assert isinstance(stored, str)
    assert json.loads(stored) == ['8 Hours Daily', 'AC Room']

    plans = client.get('/api/pricing').get_json()
    assert plans[0]['features'] == ['8 Hours Daily', 'AC Room']


def test_update_encodes_features(client, fake_db):
    plan = client.post('/api/pricing', json={'name': 'Single', 'features': []}).get_json()

    client.put(f"/api/pricing/{plan['id']}", json={'features': ['WiFi Access']})

    assert fake_db.tables['pricing_plans'][0]['features'] == '["WiFi Access"]'


def test_update_without_features_leaves_them_alone(client, fake_db):
    plan = client.post('/api/pricing', json={'name': 'Single', 'features': ['AC Room']}).get_json()

    client.put(f"/api/pricing/{plan['id']}", json={'price': 550})

    assert fake_db.calls[-1]['body'] == {'price': 550}
    assert fake_db.tables['pricing_plans'][0]['features'] == '["AC Room"]'


@pytest.mark.parametrize('stored, expected', [
    ('not json', []),
    (None, []),
    (['Already', 'a list'], ['Already', 'a list']),
    ('"single"', ['single']),
])
def test_stored_features_variants(app, stored, expected):
    app.extensions['supabase_rest'] = FakeSupabaseClient({
        'pricing_plans': [{'id': 1, 'name': 'Legacy', 'order_num': 1, 'features': stored}]
    })

    plans = app.test_client().get('/api/pricing').get_json()

    assert plans[0]['features'] == expected


def test_non_ascii_features_survive(client):
    client.post('/api/pricing', json={'name': 'पूरा दिन', 'features': ['शान्त वातावरण']})
    assert client.get('/api/pricing').get_json()[0]['features'] == ['शान्त वातावरण']
