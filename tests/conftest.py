import pytest
from fastapi.testclient import TestClient

from reading_tracker_api.app.core.store import get_store
from reading_tracker_api.app.main import app


@pytest.fixture(autouse=True)
def store():
    # The store is process-wide; start every test from the seed state
    store = get_store()
    store.reset()
    yield store
    store.reset()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_book(client):
    def _make_book(title="Dune", total_pages=100, **extra):
        payload = {"title": title, "totalPages": total_pages, **extra}
        response = client.post("/books", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make_book
