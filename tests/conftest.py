import pytest
from fastapi.testclient import TestClient

from api.main import app
from models.database import get_users_collection
from tests.fakes import FakeUsersCollection


@pytest.fixture
def users():
    """Fresh in-memory users collection."""
    return FakeUsersCollection()


@pytest.fixture
def client(users):
    """TestClient wired to the fake users collection."""
    app.dependency_overrides[get_users_collection] = lambda: users

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register a user and return the response body."""
    def _make_user(username: str):
        response = client.post("/api/exercise/new-user", json={"username": username})
        assert response.status_code == 200
        return response.json()
    return _make_user
