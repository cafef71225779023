"""DTOs for task completion and progress queries (no web dependency)."""

from __future__ import annotations

from dataclasses import dataclass

from admissions.domain.entities.flow import Step, Task
from admissions.domain.enums import UserStatus


@dataclass(frozen=True)
class CurrentPosition:
    """Where a user should act next: 0-based step index, the step, and the task."""

    step_index: int
    step: Step
    task: Task

    def __post_init__(self) -> None:
        if self.step_index < 0:
            raise ValueError("Step index cannot be negative")


@dataclass(frozen=True)
class TaskOutcome:
    """Result of evaluating one submitted task."""

    task_id: str
    task_name: str
    passed: bool


@dataclass(frozen=True)
class TaskCompletionResult:
    """Response of the completion transaction: task outcome plus fresh status."""

    user_id: str
    outcome: TaskOutcome
    user_status: UserStatus


@dataclass(frozen=True)
class ProgressSummary:
    """Current position with progress counts (position None when finished)."""

    user_id: str
    position: CurrentPosition | None
    completed_tasks: int
    total_tasks: int

    @property
    def is_complete(self) -> bool:
        return self.position is None
