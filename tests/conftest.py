import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.store import MemoryStore
from main import create_app


@pytest.fixture
def store():
    """A fresh, empty in-memory store."""
    return MemoryStore()


@pytest.fixture
def client(store):
    """Returns a TestClient for an app backed by the store fixture."""
    app = create_app(Settings(), store=store)
    with TestClient(app) as test_client:
        yield test_client
