"""Task completion API schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from admissions.application.dtos.progress import TaskCompletionResult
from admissions.domain.enums import UserStatus


class CompleteTaskRequest(BaseModel):
    """Request body for PUT /steps/complete. task_id accepts a task id or name."""

    user_id: str = Field(..., min_length=1)
    task_id: str = Field(..., min_length=1)
    task_payload: dict[str, Any] | None = None


class TaskResultResponse(BaseModel):
    """Outcome of one evaluated task."""

    task_id: str
    task_name: str
    passed: bool


class CompleteTaskResponse(BaseModel):
    """Outcome of the completion plus the user's recomputed status."""

    user_id: str
    task_name: str
    results: list[TaskResultResponse]
    user_status: UserStatus

    @classmethod
    def from_result(cls, result: TaskCompletionResult) -> CompleteTaskResponse:
        outcome = result.outcome
        return cls(
            user_id=result.user_id,
            task_name=outcome.task_name,
            results=[
                TaskResultResponse(
                    task_id=outcome.task_id,
                    task_name=outcome.task_name,
                    passed=outcome.passed,
                )
            ],
            user_status=result.user_status,
        )
