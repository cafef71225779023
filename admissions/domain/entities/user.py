"""User domain entities: per-user task results and point-in-time snapshots."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any


def _frozen_mapping(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, eq=False)
class TaskResult:
    """One user's outcome for one task. Immutable once created.

    Attributes:
        task_id: Task the result belongs to.
        passed: Outcome of the task's pass condition.
        completed_at: Resolved (UTC) timestamp of the submission.
        payload: Read-only copy of the submitted payload.
    """

    task_id: str
    passed: bool
    completed_at: datetime
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.task_id:
            raise ValueError("Task id cannot be blank")
        if self.completed_at is None:
            raise ValueError("Timestamp cannot be null")
        object.__setattr__(self, "payload", _frozen_mapping(self.payload))


@dataclass(frozen=True, eq=False)
class UserStateSnapshot:
    """Immutable point-in-time view of a user's completed tasks.

    Never aliases the live store; take a fresh one for every read sequence.
    """

    user_id: str
    completed_tasks: Mapping[str, TaskResult] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "completed_tasks", _frozen_mapping(self.completed_tasks))

    def result_for(self, task_id: str) -> TaskResult | None:
        return self.completed_tasks.get(task_id)

    def has_passed(self, task_id: str) -> bool:
        result = self.completed_tasks.get(task_id)
        return result is not None and result.passed

    def has_failure(self) -> bool:
        """Return whether any stored result (visible or not) is failing."""
        return any(not r.passed for r in self.completed_tasks.values())


class User:
    """Mutable in-memory user record owned by the user store.

    The completed-tasks mapping only grows or has values replaced (last
    write wins per task id). Every mutation and copy goes through ``lock``,
    which callers may also hold across a whole read-validate-write sequence.
    """

    def __init__(self, user_id: str, email: str) -> None:
        if not user_id:
            raise ValueError("User id cannot be blank")
        self.id = user_id
        self.email = email
        self.lock = threading.RLock()
        self._completed_tasks: dict[str, TaskResult] = {}

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r}, tasks={len(self._completed_tasks)})"

    @property
    def completed_tasks(self) -> Mapping[str, TaskResult]:
        """Read-only copy of the latest result per task id."""
        with self.lock:
            return _frozen_mapping(self._completed_tasks)

    def add_task_result(self, result: TaskResult) -> None:
        with self.lock:
            self._completed_tasks[result.task_id] = result

    def snapshot(self) -> UserStateSnapshot:
        with self.lock:
            return UserStateSnapshot(user_id=self.id, completed_tasks=self._completed_tasks)
