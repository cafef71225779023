"""User API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, EmailStr

from admissions.application.dtos.progress import ProgressSummary
from admissions.domain.enums import UserStatus


class UserCreateRequest(BaseModel):
    """Request body for creating a user."""

    email: EmailStr


class UserCreatedResponse(BaseModel):
    """Id assigned to a newly created user."""

    id: str


class UserResponse(BaseModel):
    """User with the number of tasks that have a stored result."""

    id: str
    email: str
    completed_tasks: int


class UserStatusResponse(BaseModel):
    """Aggregate status of a user's application."""

    status: UserStatus


class CurrentPositionResponse(BaseModel):
    """Next task for a user. Position fields are null once nothing remains."""

    user_id: str
    status: Literal["in_progress", "completed"]
    current_step_index: int | None = None
    current_step_id: str | None = None
    current_step_name: str | None = None
    current_task_id: str | None = None
    current_task_name: str | None = None
    completed_tasks: int
    total_tasks: int

    @classmethod
    def from_summary(cls, summary: ProgressSummary) -> CurrentPositionResponse:
        position = summary.position
        if position is None:
            return cls(
                user_id=summary.user_id,
                status="completed",
                completed_tasks=summary.completed_tasks,
                total_tasks=summary.total_tasks,
            )
        return cls(
            user_id=summary.user_id,
            status="in_progress",
            current_step_index=position.step_index,
            current_step_id=position.step.id,
            current_step_name=position.step.name,
            current_task_id=position.task.id,
            current_task_name=position.task.name,
            completed_tasks=summary.completed_tasks,
            total_tasks=summary.total_tasks,
        )
