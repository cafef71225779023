"""Application lifespan: startup and shutdown.

Single place for startup wiring. Loads and compiles the flow once, builds
the in-memory user store and the services on top of it. A flow that fails
to load raises ConfigurationError and the app does not start.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from admissions.application.services.user_service import UserService
from admissions.application.use_cases.tasks import CompleteTaskUseCase
from admissions.core.config import get_settings
from admissions.infrastructure.flow import load_flow
from admissions.infrastructure.persistence import InMemoryUserStore
from admissions.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI) -> None:
    """Attach flow, user store and services to app.state.

    Called by the lifespan; tests call it directly to reset state between runs.
    """
    settings = get_settings()
    flow = load_flow(settings.flow_definition_path)
    user_store = InMemoryUserStore()

    app.state.flow = flow
    app.state.user_store = user_store
    app.state.user_service = UserService(flow, user_store)
    app.state.complete_task_use_case = CompleteTaskUseCase(
        flow,
        user_store,
        serialize=settings.serialize_user_transactions,
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit log shutdown.

    Startup order: logging, flow load, user store and services.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    init_app_state(app)
    logger.info(
        "%s %s started (serialize_user_transactions=%s)",
        settings.app_name,
        settings.app_version,
        settings.serialize_user_transactions,
    )

    yield

    # ---- Shutdown ----
    logger.info("%s shut down with %d users in memory", settings.app_name, len(app.state.user_store))
