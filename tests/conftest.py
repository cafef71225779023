"""Pytest configuration and fixtures for admissions.

Uses admissions.main:app for HTTP tests. ASGITransport does not run the
lifespan, so app state is rebuilt for every test by reset_app_state; each
test starts from an empty user store. Rate limiting is off unless a test
turns it back on.
"""

from collections.abc import Callable
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from admissions.core.lifespan import init_app_state
from admissions.core.limiter import limiter
from admissions.domain.entities.flow import Flow, Step, Task
from admissions.domain.enums import ConditionKind
from admissions.domain.value_objects.condition import Condition
from admissions.infrastructure.persistence import InMemoryUserStore
from admissions.main import app

FIXED_NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_app_state() -> None:
    """Fresh flow, store and services on app.state; limiter disabled."""
    limiter.enabled = False
    limiter.reset()
    init_app_state(app)


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock returning FIXED_NOW, for deterministic timestamp fallbacks."""
    return lambda: FIXED_NOW


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def small_flow() -> Flow:
    """Two-step flow: a scored test (non-redoable), then an ordered pair of tasks."""
    return Flow(
        id="small",
        name="Small Flow",
        steps=(
            Step(
                id="exam",
                name="Exam",
                tasks=(
                    Task(
                        id="exam",
                        name="Exam",
                        required_fields=frozenset({"score"}),
                        pass_condition=Condition(
                            ConditionKind.SCORE_GREATER_THAN, field="score", threshold=50.0
                        ),
                        redoable=False,
                    ),
                ),
            ),
            Step(
                id="interview",
                name="Interview",
                tasks=(
                    Task(id="schedule", name="Schedule", required_fields=frozenset({"date"})),
                    Task(
                        id="perform",
                        name="Perform",
                        required_fields=frozenset({"decision"}),
                        pass_condition=Condition(
                            ConditionKind.EQUALS, field="decision", value="passed"
                        ),
                    ),
                ),
            ),
        ),
    )
