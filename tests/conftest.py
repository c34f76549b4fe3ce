import pytest

from drishti import create_app
from tests.fake_supabase import FakeSupabaseClient


@pytest.fixture
def fake_db():
    return FakeSupabaseClient()


@pytest.fixture
def app(fake_db):
    flask_app = create_app('testing')
    flask_app.extensions['supabase_rest'] = fake_db
    yield flask_app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
