"""Tests for user endpoints (create, get, flow, current position, status)."""

from httpx import AsyncClient


async def _create(client: AsyncClient, email: str = "ada@example.com") -> str:
    response = await client.post("/api/v1/users", json={"email": email})
    assert response.status_code == 201
    return response.json()["id"]


async def test_create_user_returns_201_with_id(client: AsyncClient) -> None:
    response = await client.post("/api/v1/users", json={"email": "ada@example.com"})
    assert response.status_code == 201
    assert response.json() == {"id": "1"}


async def test_create_user_duplicate_email_returns_409(client: AsyncClient) -> None:
    await _create(client, "Ada@Example.com")
    response = await client.post("/api/v1/users", json={"email": "ada@example.com"})
    assert response.status_code == 409
    assert response.json()["error"] == "DUPLICATE_USER"


async def test_create_user_invalid_email_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/users", json={"email": "not-an-email"})
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "VALIDATION_ERROR"
    assert data["details"][0]["field"] == "email"


async def test_create_user_missing_body_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/v1/users", json={})
    assert response.status_code == 400


async def test_get_user(client: AsyncClient) -> None:
    user_id = await _create(client)
    response = await client.get(f"/api/v1/users/{user_id}")
    assert response.status_code == 200
    assert response.json() == {
        "id": user_id,
        "email": "ada@example.com",
        "completed_tasks": 0,
    }


async def test_unknown_user_returns_404_everywhere(client: AsyncClient) -> None:
    for path in ("", "/flow", "/current", "/status"):
        response = await client.get(f"/api/v1/users/999{path}")
        assert response.status_code == 404, path
        assert response.json()["error"] == "USER_NOT_FOUND"


async def test_user_flow_lists_visible_steps(client: AsyncClient) -> None:
    user_id = await _create(client)
    response = await client.get(f"/api/v1/users/{user_id}/flow")
    assert response.status_code == 200
    steps = response.json()
    assert [s["id"] for s in steps][:2] == ["personal_details", "iq_test"]
    assert sum(len(s["tasks"]) for s in steps) == 8


async def test_current_position_for_new_user(client: AsyncClient) -> None:
    user_id = await _create(client)
    response = await client.get(f"/api/v1/users/{user_id}/current")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "in_progress"
    assert data["current_step_index"] == 0
    assert data["current_step_id"] == "personal_details"
    assert data["current_task_id"] == "personal_details"
    assert data["completed_tasks"] == 0
    assert data["total_tasks"] == 8


async def test_status_for_new_user_is_in_progress(client: AsyncClient) -> None:
    user_id = await _create(client)
    response = await client.get(f"/api/v1/users/{user_id}/status")
    assert response.status_code == 200
    assert response.json() == {"status": "in_progress"}
