"""Recipe step API tests."""

from datetime import UTC, datetime

import pytest

from decaf.models.recipe import RecipeStep


def _add_step(client, headers, recipe_id, step_order, command_type="pour", **extra):
    return client.post(
        "/api/v1/recipes/steps",
        headers=headers,
        json={
            "recipe_id": recipe_id,
            "step_order": step_order,
            "command_type": command_type,
            **extra,
        },
    )


def test_create_step(client, auth_headers, recipe):
    """Test adding a step to a recipe."""
    response = _add_step(
        client, auth_headers, recipe["id"], 0, "grind", duration_sec=20, command_parameter=15
    )
    assert response.status_code == 201
    data = response.json()
    assert data["recipe_id"] == recipe["id"]
    assert data["step_order"] == 0
    assert data["command_type"] == "grind"
    assert data["duration_sec"] == 20
    assert data["command_parameter"] == 15


def test_steps_are_listed_in_step_order(client, auth_headers, recipe):
    """Test that steps come back sorted regardless of insertion order."""
    _add_step(client, auth_headers, recipe["id"], 2, "wait")
    _add_step(client, auth_headers, recipe["id"], 0, "grind")
    _add_step(client, auth_headers, recipe["id"], 1, "pour")

    response = client.get(f"/api/v1/recipes/{recipe['id']}/steps")
    assert response.status_code == 200
    steps = response.json()
    assert [s["step_order"] for s in steps] == [0, 1, 2]
    assert [s["command_type"] for s in steps] == ["grind", "pour", "wait"]


def test_step_order_ties_are_deterministic(client, recipe, db):
    """Test that steps sharing step_order and created_at fall back to id order."""
    created_at = datetime(2024, 1, 1, 8, 0, tzinfo=UTC)
    for step_id, command in [("step-b", "wait"), ("step-a", "pour"), ("step-c", "move")]:
        db.add(
            RecipeStep(
                id=step_id,
                recipe_id=recipe["id"],
                step_order=1,
                command_type=command,
                created_at=created_at,
            )
        )
    db.commit()

    response = client.get(f"/api/v1/recipes/{recipe['id']}/steps")
    assert [s["id"] for s in response.json()] == ["step-a", "step-b", "step-c"]


def test_list_steps_empty(client, recipe):
    """Test a recipe with no steps."""
    response = client.get(f"/api/v1/recipes/{recipe['id']}/steps")
    assert response.status_code == 200
    assert response.json() == []


def test_list_steps_unknown_recipe(client):
    """Test listing steps for a recipe that does not exist."""
    response = client.get("/api/v1/recipes/nonexistent-id/steps")
    assert response.status_code == 404


def test_create_step_unknown_recipe(client, auth_headers):
    """Test adding a step to a recipe that does not exist."""
    response = _add_step(client, auth_headers, "nonexistent-id", 0)
    assert response.status_code == 404


@pytest.mark.parametrize(
    "overrides",
    [
        {"command_type": "brew"},
        {"step_order": -1},
        {"duration_sec": -5},
    ],
)
def test_create_step_validation(client, auth_headers, recipe, overrides):
    """Test step field validation."""
    body = {"recipe_id": recipe["id"], "step_order": 0, "command_type": "pour", **overrides}
    response = client.post("/api/v1/recipes/steps", headers=auth_headers, json=body)
    assert response.status_code == 400


def test_create_step_requires_auth(client, recipe):
    """Test that anonymous callers cannot add steps."""
    response = client.post(
        "/api/v1/recipes/steps",
        json={"recipe_id": recipe["id"], "step_order": 0, "command_type": "pour"},
    )
    assert response.status_code == 401


def test_create_step_forbidden_for_non_owner(client, other_auth_headers, recipe):
    """Test that another user cannot add steps."""
    response = _add_step(client, other_auth_headers, recipe["id"], 0)
    assert response.status_code == 403


def test_get_step(client, auth_headers, recipe):
    """Test getting a step by ID."""
    step = _add_step(client, auth_headers, recipe["id"], 0, "measure").json()

    response = client.get(f"/api/v1/recipes/steps/{step['id']}")
    assert response.status_code == 200
    assert response.json() == step


def test_get_step_not_found(client):
    """Test getting a step that does not exist."""
    response = client.get("/api/v1/recipes/steps/nonexistent-id")
    assert response.status_code == 404


def test_update_step(client, auth_headers, recipe):
    """Test partially updating a step."""
    step = _add_step(client, auth_headers, recipe["id"], 0, "pour", command_parameter=50).json()

    response = client.put(
        f"/api/v1/recipes/steps/{step['id']}",
        headers=auth_headers,
        json={"command_parameter": 200, "duration_sec": 60},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["command_parameter"] == 200
    assert data["duration_sec"] == 60
    assert data["command_type"] == "pour"
    assert data["step_order"] == 0


def test_update_step_forbidden_for_non_owner(client, auth_headers, other_auth_headers, recipe):
    """Test that another user cannot update a step."""
    step = _add_step(client, auth_headers, recipe["id"], 0).json()

    response = client.put(
        f"/api/v1/recipes/steps/{step['id']}",
        headers=other_auth_headers,
        json={"command_type": "wait"},
    )
    assert response.status_code == 403
    assert client.get(f"/api/v1/recipes/steps/{step['id']}").json()["command_type"] == "pour"


def test_delete_step(client, auth_headers, recipe):
    """Test deleting a step."""
    step = _add_step(client, auth_headers, recipe["id"], 0).json()

    response = client.delete(f"/api/v1/recipes/steps/{step['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert client.get(f"/api/v1/recipes/steps/{step['id']}").status_code == 404


def test_delete_step_forbidden_for_non_owner(client, auth_headers, other_auth_headers, recipe):
    """Test that another user cannot delete a step."""
    step = _add_step(client, auth_headers, recipe["id"], 0).json()

    response = client.delete(f"/api/v1/recipes/steps/{step['id']}", headers=other_auth_headers)
    assert response.status_code == 403
    assert client.get(f"/api/v1/recipes/steps/{step['id']}").status_code == 200
