import pytest
from fastapi.testclient import TestClient

from novalife.main import app
from novalife.storage.backends import LocalBackend
from novalife.storage.store import BlobStore, get_store

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password123"


@pytest.fixture
def local_backend(tmp_path):
    return LocalBackend(tmp_path / "data", tmp_path / "uploads")


@pytest.fixture
def store(local_backend):
    return BlobStore(primary=None, fallback=local_backend)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/admin",
        json={"action": "login", "username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    # Keep the tests explicit about auth rather than relying on the cookie jar
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
