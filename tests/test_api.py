"""Application-level tests: service endpoints, config and an end-to-end flow."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError as SettingsValidationError

from decaf import __version__
from decaf.config import DEFAULT_JWT_SECRET, Settings
from decaf.main import create_app
from decaf.services.cats import CatService


def test_root(client):
    """Test the service information endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "DECAF API"
    assert data["version"] == __version__


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["environment"] == "test"
    assert data["timestamp"]


def test_unknown_route(client):
    """Test that unknown routes 404."""
    response = client.get("/api/v1/teapots")
    assert response.status_code == 404


@pytest.mark.parametrize(
    "environment,detail",
    [
        ("test", "Internal Server Error"),
        ("production", "Internal Server Error"),
        ("development", "secret detail"),
    ],
)
def test_unhandled_error_hides_details_outside_development(
    settings, monkeypatch, environment, detail
):
    """Test that crashes render as 500 and only development shows the message."""

    def crash(self):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(CatService, "list_cats", crash)
    app = create_app(
        Settings(
            _env_file=None,
            database_url=settings.database_url,
            environment=environment,
            jwt_secret="another-test-secret",  # noqa: S106
        )
    )

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/v1/cats")

    assert response.status_code == 500
    assert response.json() == {"detail": detail}


def test_create_app_defers_database_setup(tmp_path):
    """Test that building the app leaves the filesystem alone until startup."""
    data_dir = tmp_path / "data"
    app = create_app(
        Settings(_env_file=None, database_url=f"sqlite:///{data_dir}/decaf.db", environment="test")
    )
    assert not data_dir.exists()
    assert not hasattr(app.state, "session_factory")

    with TestClient(app) as test_client:
        assert test_client.get("/health").status_code == 200
        assert (data_dir / "decaf.db").exists()
        assert hasattr(app.state, "session_factory")


def test_production_rejects_default_secret():
    """Test that production refuses to start with the default JWT secret."""
    with pytest.raises(SettingsValidationError):
        Settings(_env_file=None, environment="production", jwt_secret=DEFAULT_JWT_SECRET)

    settings = Settings(_env_file=None, environment="production", jwt_secret="a-real-secret")
    assert settings.is_production
    assert not settings.is_development


def test_brew_day_flow(client, db):
    """Register, log in by PIN, build a recipe with steps and tags, then tidy up."""
    response = client.post(
        "/api/v1/auth/register",
        json={"username": "alice", "password": "pourover42", "pin": "24681357"},
    )
    assert response.status_code == 201
    alice_id = response.json()["id"]

    response = client.post("/api/v1/auth/login", json={"username": "alice", "pin": "24681357"})
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    client.cookies.clear()

    response = client.post(
        "/api/v1/recipes",
        headers=headers,
        json={
            "name": "Sunday Chemex",
            "coffee_weight": 30,
            "water_weight": 500,
            "water_temperature": 95,
            "brew_time": 270,
        },
    )
    assert response.status_code == 201
    recipe = response.json()
    assert recipe["created_by"] == alice_id

    for order, command in enumerate(["grind", "pour", "wait", "pour"]):
        response = client.post(
            "/api/v1/recipes/steps",
            headers=headers,
            json={"recipe_id": recipe["id"], "step_order": order, "command_type": command},
        )
        assert response.status_code == 201

    response = client.post(
        "/api/v1/tags/add-to-recipe",
        json={"recipe_id": recipe["id"], "tag_names": ["Chemex", "Weekend", "chemex"]},
    )
    assert response.status_code == 200
    assert [tag["slug"] for tag in response.json()["tags_added"]] == ["chemex", "weekend"]

    steps = client.get(f"/api/v1/recipes/{recipe['id']}/steps").json()
    assert [s["command_type"] for s in steps] == ["grind", "pour", "wait", "pour"]

    response = client.get(f"/api/v1/recipes/user/{alice_id}", headers=headers)
    assert [r["name"] for r in response.json()] == ["Sunday Chemex"]

    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/recipes/{recipe['id']}/steps").status_code == 404
    assert len(client.get("/api/v1/tags").json()) == 2
