"""Shared test fixtures for todolist-core."""

from datetime import UTC, datetime, timedelta

import pytest

from todolist_core.auth.token import IdentityClaim, TokenService
from todolist_core.config import load_settings
from todolist_core.db import get_core
from todolist_core.db.seed import seed_users
from todolist_core.main import create_app

TEST_ACCESS_SECRET = "test-access-secret-0123456789abcdef"
TEST_REFRESH_SECRET = "test-refresh-secret-0123456789abcdef"

JOHN = {"email": "john@example.com", "password": "password123"}
JANE = {"email": "jane@example.com", "password": "password456"}


@pytest.fixture
def settings(tmp_path):
    """Settings with injected test secrets and a throwaway database file."""
    return load_settings(
        _env_file=None,
        database_path=str(tmp_path / "test.db"),
        jwt_access_secret=TEST_ACCESS_SECRET,
        jwt_refresh_secret=TEST_REFRESH_SECRET,
        bcrypt_work_factor=4,
        environment="development",
    )


@pytest.fixture
def app(settings):
    """Application built from the test settings. The schema is applied."""
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Test client. Cookies persist across requests, like a browser."""
    return app.test_client()


@pytest.fixture
def other_client(app):
    """Second independent browser session.

    Neither client is used as a context manager: two clients holding
    request contexts on one app would pop them out of order.
    """
    return app.test_client()


@pytest.fixture
def seeded(app, settings):
    """Seed john (id 1) and jane (id 2)."""
    seed_users(settings.database_path, rounds=4)


@pytest.fixture
def core(settings, app):
    """Autocommit Core on the test database, closed after the test."""
    core = get_core(database_path=settings.database_path)
    yield core
    core.close()


@pytest.fixture
def token_service(settings):
    return TokenService(settings.token_keys())


@pytest.fixture
def john_claim():
    return IdentityClaim(user_id=1, email="john@example.com", username="john")


@pytest.fixture
def expired_access_token(token_service, john_claim):
    """Access token for john that expired a minute ago."""
    issued = datetime.now(UTC) - timedelta(minutes=16)
    return token_service.issue_access_token(john_claim, issued_at=issued)


@pytest.fixture
def john_client(client, seeded):
    """Client logged in as john."""
    response = client.post("/auth/login", json=JOHN)
    assert response.status_code == 200
    return client


@pytest.fixture
def jane_client(other_client, seeded):
    """Client logged in as jane."""
    response = other_client.post("/auth/login", json=JANE)
    assert response.status_code == 200
    return other_client
