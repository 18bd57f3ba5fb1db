"""Root conftest: app con Mongo en memoria (mongomock) y argon2 barato."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.infrastructure.db.bootstrap import ensure_indexes
from app.main import create_app
from app.services.auth_service import build_password_hasher

TEST_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        password_hash_time_cost=1,
        password_hash_memory_cost=1024,
        password_hash_parallelism=1,
        log_level="WARNING",
    )


@pytest.fixture
def db():
    database = mongomock.MongoClient()["notes_test"]
    ensure_indexes(database)
    return database


@pytest.fixture
def hasher(settings):
    return build_password_hasher(settings)


@pytest.fixture
def client(settings, db):
    return TestClient(create_app(settings=settings, db=db))


@pytest.fixture
def register_user(client):
    """Registra un usuario y devuelve su access token."""
    def _register(email="a@x.com", password="secret1", full_name="Alice") -> str:
        r = client.post("/create-account", json={"fullName": full_name, "email": email, "password": password})
        assert r.status_code == 201, r.text
        return r.json()["accessToken"]
    return _register


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    return auth
