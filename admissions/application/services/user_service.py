"""User application service: create users and answer progress queries."""

from __future__ import annotations

from admissions.application.dtos.outcome import Outcome
from admissions.application.dtos.progress import CurrentPosition, ProgressSummary
from admissions.application.interfaces.repositories import IUserRepository
from admissions.application.services.progress_calculator import (
    compute_current_position,
    compute_user_status,
    summarize_progress,
    visible_steps,
)
from admissions.domain.entities.flow import Flow, Step
from admissions.domain.entities.user import User
from admissions.domain.enums import UserStatus
from admissions.domain.exceptions import UserNotFoundException


class UserService:
    """User lifecycle and read-side queries over the flow and the user store.

    Queries take a fresh snapshot per call. Methods returning Outcome fail
    with UserNotFoundException for an unknown id; the bare calculators
    (current_position, user_status) treat an unknown id as an empty state.
    """

    def __init__(self, flow: Flow, user_repo: IUserRepository) -> None:
        self._flow = flow
        self._user_repo = user_repo

    @property
    def flow(self) -> Flow:
        return self._flow

    def create_user(self, email: str) -> Outcome[User]:
        return self._user_repo.create_user(email)

    def get_user(self, user_id: str) -> Outcome[User]:
        user = self._user_repo.get(user_id)
        if user is None:
            return Outcome.failure(UserNotFoundException(user_id))
        return Outcome.success(user)

    def current_position(self, user_id: str) -> CurrentPosition | None:
        return compute_current_position(self._flow, self._user_repo.snapshot(user_id))

    def user_status(self, user_id: str) -> UserStatus:
        return compute_user_status(self._flow, self._user_repo.snapshot(user_id))

    def visible_steps_for(self, user_id: str) -> Outcome[tuple[Step, ...]]:
        if self._user_repo.get(user_id) is None:
            return Outcome.failure(UserNotFoundException(user_id))
        return Outcome.success(visible_steps(self._flow, self._user_repo.snapshot(user_id)))

    def status_for(self, user_id: str) -> Outcome[UserStatus]:
        if self._user_repo.get(user_id) is None:
            return Outcome.failure(UserNotFoundException(user_id))
        return Outcome.success(self.user_status(user_id))

    def progress_for(self, user_id: str) -> Outcome[ProgressSummary]:
        if self._user_repo.get(user_id) is None:
            return Outcome.failure(UserNotFoundException(user_id))
        return Outcome.success(summarize_progress(self._flow, self._user_repo.snapshot(user_id)))
