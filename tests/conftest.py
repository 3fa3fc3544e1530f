import pytest

from app import create_app

SECRET = "test-signing-secret-that-is-comfortably-longer-than-sixty-four-bytes-for-hs512"


@pytest.fixture
def app():
    app = create_app({"JWT_SECRET_KEY": SECRET, "TESTING": True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
