"""Validation steps of the task completion transaction.

Each check takes the static flow entities plus a snapshot and returns the
matching domain error, or None when the check passes. The use case runs
them in order and stops at the first error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from admissions.domain.entities.flow import Flow, Step, Task
from admissions.domain.entities.user import UserStateSnapshot
from admissions.domain.exceptions import (
    MissingRequiredFieldsException,
    TaskAlreadyCompletedException,
    TaskOrderViolationException,
)


def resolve_visible_task(
    flow: Flow, identifier: str, snapshot: UserStateSnapshot
) -> Task | None:
    """First task in flow order whose id or name matches (case-insensitive) and is visible."""
    for _, _, task in flow.iter_tasks():
        if task.matches(identifier) and task.is_visible(snapshot):
            return task
    return None


def check_redoable(
    task: Task, snapshot: UserStateSnapshot
) -> TaskAlreadyCompletedException | None:
    """A non-redoable task may have one result, passing or failing."""
    if not task.redoable and snapshot.result_for(task.id) is not None:
        return TaskAlreadyCompletedException(task.name)
    return None


def check_task_order(
    step: Step, task: Task, snapshot: UserStateSnapshot
) -> TaskOrderViolationException | None:
    """Every earlier visible task in the step must have a passing result.

    Reports the first unmet prerequisite in step order.
    """
    visible = step.visible_tasks(snapshot)
    position = next((i for i, t in enumerate(visible) if t.id == task.id), None)
    if position is None:
        raise RuntimeError(f"Task {task.id!r} is not among the visible tasks of step {step.id!r}")

    for previous in visible[:position]:
        if not snapshot.has_passed(previous.id):
            return TaskOrderViolationException(task.name, previous.name)
    return None


def check_required_fields(
    task: Task, payload: Mapping[str, Any] | None
) -> MissingRequiredFieldsException | None:
    """All required field names must be payload keys (any value, including null)."""
    missing = task.missing_fields(payload)
    if missing:
        return MissingRequiredFieldsException(task.name, missing)
    return None
