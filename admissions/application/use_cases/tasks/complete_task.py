"""Complete task use case: validate and commit one task outcome for one user."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import nullcontext
from datetime import datetime
from typing import Any

from admissions.application.dtos.outcome import Outcome
from admissions.application.dtos.progress import TaskCompletionResult, TaskOutcome
from admissions.application.interfaces.repositories import IUserRepository
from admissions.application.services.progress_calculator import compute_user_status
from admissions.application.services.task_completion_validator import (
    check_redoable,
    check_required_fields,
    check_task_order,
    resolve_visible_task,
)
from admissions.domain.entities.flow import Flow
from admissions.domain.entities.user import TaskResult
from admissions.domain.exceptions import (
    AdmissionsException,
    TaskNotFoundException,
    UserNotFoundException,
)
from admissions.shared.telemetry.logging import get_logger
from admissions.shared.utils.datetime import resolve_timestamp, utc_now

logger = get_logger(__name__)

TIMESTAMP_FIELD = "timestamp"


class CompleteTaskUseCase:
    """Runs the completion transaction against the flow and the user store.

    Order: resolve visible task, locate its step, redoability gate, order
    check, required fields, pass evaluation, commit, recompute status.
    With ``serialize=True`` the user's lock is held from the first snapshot
    to the commit, so concurrent completions for one user cannot both
    validate against the same pre-write state. With ``serialize=False``
    only the write itself is locked and the last commit wins.
    """

    def __init__(
        self,
        flow: Flow,
        user_repo: IUserRepository,
        *,
        serialize: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._flow = flow
        self._user_repo = user_repo
        self._serialize = serialize
        self._clock = clock

    def execute(
        self,
        user_id: str,
        task_identifier: str,
        payload: Mapping[str, Any] | None,
    ) -> Outcome[TaskCompletionResult]:
        """Complete a task by id or name.

        Args:
            user_id: Existing user id.
            task_identifier: Task id or name, case-insensitive.
            payload: Submitted data; may carry a ``timestamp`` key.

        Returns:
            Outcome with the task outcome and fresh user status, or one of
            UserNotFound, TaskNotFound, TaskAlreadyCompleted,
            TaskOrderViolation, MissingRequiredFields.
        """
        if self._user_repo.get(user_id) is None:
            return Outcome.failure(UserNotFoundException(user_id))

        guard = self._user_repo.user_lock(user_id) if self._serialize else nullcontext()
        with guard:
            outcome = self._complete(user_id, task_identifier, dict(payload or {}))

        if outcome.ok:
            result = outcome.value
            logger.info(
                "Task completed: user=%s task=%s passed=%s status=%s",
                user_id,
                result.outcome.task_id,
                result.outcome.passed,
                result.user_status.value,
            )
        else:
            logger.info(
                "Task completion rejected: user=%s task=%s error=%s",
                user_id,
                task_identifier,
                outcome.error.error_code,
            )
        return outcome

    def _complete(
        self, user_id: str, task_identifier: str, payload: dict[str, Any]
    ) -> Outcome[TaskCompletionResult]:
        task = resolve_visible_task(
            self._flow, task_identifier, self._user_repo.snapshot(user_id)
        )
        if task is None:
            return Outcome.failure(TaskNotFoundException(task_identifier))

        located = self._flow.find_step_containing(task.id)
        if located is None:
            raise RuntimeError(f"Task {task.id!r} is not in any step")
        _, step = located

        snapshot = self._user_repo.snapshot(user_id)
        error: AdmissionsException | None = check_redoable(task, snapshot)
        if error is None:
            error = check_task_order(step, task, self._user_repo.snapshot(user_id))
        if error is None:
            error = check_required_fields(task, payload)
        if error is not None:
            return Outcome.failure(error)

        passed = task.evaluate_passed(payload)
        result = TaskResult(
            task_id=task.id,
            passed=passed,
            completed_at=resolve_timestamp(payload.get(TIMESTAMP_FIELD), now=self._clock),
            payload=payload,
        )
        self._user_repo.add_task_result(user_id, result)

        status = compute_user_status(self._flow, self._user_repo.snapshot(user_id))
        return Outcome.success(
            TaskCompletionResult(
                user_id=user_id,
                outcome=TaskOutcome(task_id=task.id, task_name=task.name, passed=passed),
                user_status=status,
            )
        )
