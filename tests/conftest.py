"""
Pytest fixtures: a fresh app over an in-memory SQLite database per test.
"""
import pytest

from crud_demo import create_app


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "LOG_LEVEL": "WARNING",
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_raw(client):
    """Send a raw, possibly broken, JSON payload."""
    def send(method, path, payload):
        return client.open(path, method=method, data=payload, content_type="application/json")
    return send
