import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tasktracker.core.config import Settings  # noqa: E402
from tasktracker.main import create_app  # noqa: E402

TEST_SECRET = "test-secret"
STRONG_PASSWORD = "Sup3r$ecret!"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test",
        database_url="sqlite://",
        auto_create_tables=True,
        jwt_secret_key=TEST_SECRET,
        access_token_expire_minutes=60,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def db(app):
    with Session(app.state.engine) as s:
        yield s


@pytest.fixture
def register(client):
    """Register a user and return (user_id, bearer headers)."""

    def _register(email: str, password: str = STRONG_PASSWORD):
        res = client.post(
            "/auth/register",
            json={"email": email, "password": password, "confirmPassword": password},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["user"]["id"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register
