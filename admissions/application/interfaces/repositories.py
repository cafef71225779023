"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities or application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from admissions.application.dtos.outcome import Outcome
    from admissions.domain.entities.user import TaskResult, User, UserStateSnapshot


class IUserRepository(Protocol):
    """Protocol for the user state store (DIP)."""

    def create_user(self, email: str) -> Outcome[User]:
        """Create a user; failure carries DuplicateUserException on a normalized-email collision."""

    def get(self, user_id: str) -> User | None:
        """Return the user record, or None."""

    def snapshot(self, user_id: str) -> UserStateSnapshot:
        """Return a fresh snapshot; empty (not an error) for an unknown id."""

    def add_task_result(self, user_id: str, result: TaskResult) -> bool:
        """Store result under its task id (last write wins). False if the user is unknown."""

    def user_lock(self, user_id: str) -> AbstractContextManager[object]:
        """Context manager holding the user's lock (no-op for an unknown id)."""
