"""Tests for GET /api/v1/flow."""

from httpx import AsyncClient


async def test_flow_returns_full_definition(client: AsyncClient) -> None:
    response = await client.get("/api/v1/flow")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == "admissions"
    assert len(data["steps"]) == 7

    iq_step = next(s for s in data["steps"] if s["id"] == "iq_test")
    iq_task = iq_step["tasks"][0]
    assert iq_task["redoable"] is False
    assert iq_task["required_fields"] == ["score", "test_id", "timestamp"]
    assert iq_task["pass_condition"] == {
        "type": "scoreGreaterThan",
        "field": "score",
        "threshold": 75.0,
    }
