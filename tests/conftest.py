import os

# Settings are cached on first import; pin a predictable environment first.
os.environ["WEATHER_API_KEY"] = ""
os.environ["TREFLE_API_TOKEN"] = "test-token"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["MAX_REQUEST_BODY_BYTES"] = "10000"

import pytest
from fastapi.testclient import TestClient

from app.auth.service import AuthService
from app.favorites.service import FavoriteService
from app.main import API_PREFIX, app
from tests.fakes import FakeCollection


@pytest.fixture
def client() -> TestClient:
    # Not used as a context manager, so the Mongo lifespan never runs.
    return TestClient(app)


@pytest.fixture
def api() -> str:
    return API_PREFIX


@pytest.fixture
def auth_headers() -> dict:
    token = AuthService.create_access_token("user-1", "grower@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def favorites_collection(monkeypatch: pytest.MonkeyPatch) -> FakeCollection:
    collection = FakeCollection()
    monkeypatch.setattr(FavoriteService, "get_collection", staticmethod(lambda: collection))
    return collection
