"""In-memory user store (implements IUserRepository).

Process-lifetime state only: user records keyed by id plus a uniqueness
index of normalized email -> user id. Created once by the lifespan and kept
on app.state.

Locking:
- Creation takes a lock stripe chosen by the normalized email, so two
  requests for the same email serialize while distinct emails rarely share
  a stripe. The record is inserted before the index entry; the new id is
  unknown to other callers until create_user returns.
- Each User owns a re-entrant lock guarding its results; user_lock() exposes
  it so a caller can hold it across a whole read-validate-write sequence.
"""

from __future__ import annotations

import itertools
import threading
from contextlib import AbstractContextManager, nullcontext

from admissions.application.dtos.outcome import Outcome
from admissions.domain.entities.user import TaskResult, User, UserStateSnapshot
from admissions.domain.exceptions import DuplicateUserException
from admissions.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

EMAIL_LOCK_STRIPES = 32


def normalize_email(email: str) -> str:
    """Key used only for the uniqueness check; the stored email keeps its case."""
    return email.strip().lower()


class InMemoryUserStore:
    """Concurrency-safe mapping of user id -> User with an email index."""

    def __init__(self, stripes: int = EMAIL_LOCK_STRIPES) -> None:
        self._users: dict[str, User] = {}
        self._email_index: dict[str, str] = {}
        self._email_locks = tuple(threading.Lock() for _ in range(max(1, stripes)))
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def _email_lock(self, normalized: str) -> threading.Lock:
        return self._email_locks[hash(normalized) % len(self._email_locks)]

    def _next_id(self) -> str:
        with self._id_lock:
            return str(next(self._ids))

    def create_user(self, email: str) -> Outcome[User]:
        """Create a user with the next decimal id; duplicate normalized emails fail."""
        normalized = normalize_email(email)
        with self._email_lock(normalized):
            if normalized in self._email_index:
                logger.info("Duplicate user rejected for email %s", normalized)
                return Outcome.failure(DuplicateUserException(email))
            user = User(user_id=self._next_id(), email=email)
            self._users[user.id] = user
            self._email_index[normalized] = user.id
        logger.info("User created: id=%s", user.id)
        return Outcome.success(user)

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        user_id = self._email_index.get(normalize_email(email))
        return self._users.get(user_id) if user_id is not None else None

    def snapshot(self, user_id: str) -> UserStateSnapshot:
        user = self._users.get(user_id)
        if user is None:
            return UserStateSnapshot(user_id=user_id)
        return user.snapshot()

    def add_task_result(self, user_id: str, result: TaskResult) -> bool:
        user = self._users.get(user_id)
        if user is None:
            return False
        user.add_task_result(result)
        return True

    def user_lock(self, user_id: str) -> AbstractContextManager[object]:
        user = self._users.get(user_id)
        if user is None:
            return nullcontext()
        return user.lock
