"""Presentation-layer dependency injection.

Services are built once by the lifespan and stored on app.state; routes
depend only on these providers, never on the store directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from admissions.application.services.user_service import UserService
from admissions.application.use_cases.tasks import CompleteTaskUseCase
from admissions.domain.entities.flow import Flow


def get_flow(request: Request) -> Flow:
    """Compiled flow loaded at startup."""
    return request.app.state.flow


def get_user_service(request: Request) -> UserService:
    """UserService bound to the process-wide user store."""
    return request.app.state.user_service


def get_complete_task_use_case(request: Request) -> CompleteTaskUseCase:
    """Task completion transaction bound to the flow and user store."""
    return request.app.state.complete_task_use_case


FlowDep = Annotated[Flow, Depends(get_flow)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CompleteTaskDep = Annotated[CompleteTaskUseCase, Depends(get_complete_task_use_case)]
