"""Pytest configuration and fixtures."""

import logging
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from decaf.config import Settings
from decaf.context import RequestContext
from decaf.database import Base, build_engine, get_db
from decaf.main import create_app


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id, username and token."""

    def __init__(self, *args, user_id: str, username: str, token: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username
        self.token = token


DEFAULT_PASSWORD = "testpass123"
DEFAULT_PIN = "12345678"

SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

test_settings = Settings(
    _env_file=None,
    database_url=SQLALCHEMY_DATABASE_URL,
    environment="test",
    bcrypt_rounds=4,
    jwt_secret="test-secret",  # noqa: S106
)

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

app = create_app(test_settings)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def settings():
    return test_settings


@pytest.fixture
def ctx(db):
    """Anonymous request context for calling services directly."""
    return RequestContext(db=db, user=None, logger=logging.getLogger("tests"))


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username: str, password: str = DEFAULT_PASSWORD, pin=DEFAULT_PIN):
    """Register a user, log in with the password and return bearer headers."""
    response = client.post(
        "/api/v1/auth/register",
        json={"username": username, "password": password, "pin": pin},
    )
    assert response.status_code == 201

    response = client.post(
        "/api/v1/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200
    data = response.json()

    # Tests authenticate explicitly; don't let the session cookie leak between calls
    client.cookies.clear()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        username=username,
        token=data["token"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_and_login(client, "testuser")


@pytest.fixture
def other_auth_headers(client):
    """A second user, for ownership checks."""
    return register_and_login(client, "otheruser")


RECIPE_BODY = {
    "name": "Classic V60",
    "description": "Bright and clean",
    "coffee_weight": 15.0,
    "water_weight": 250.0,
    "water_temperature": 94,
    "grind_size": "medium-fine",
    "brew_time": 180,
}


@pytest.fixture
def recipe(client, auth_headers):
    """A recipe owned by the auth_headers user."""
    response = client.post("/api/v1/recipes", headers=auth_headers, json=RECIPE_BODY)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def make_user(client):
    """Factory fixture: register and log in another user."""

    def _make_user(username: str, password: str = DEFAULT_PASSWORD, pin=DEFAULT_PIN):
        return register_and_login(client, username, password, pin)

    return _make_user


@pytest.fixture
def recipe_body():
    return dict(RECIPE_BODY)
