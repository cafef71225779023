"""Tests for position and status calculators."""

from datetime import datetime, timezone

from admissions.application.services.progress_calculator import (
    compute_current_position,
    compute_user_status,
    summarize_progress,
)
from admissions.application.services.user_service import UserService
from admissions.domain.entities.flow import Flow, Step
from admissions.domain.entities.user import TaskResult, UserStateSnapshot
from admissions.domain.enums import UserStatus
from admissions.domain.exceptions import UserNotFoundException
from admissions.infrastructure.persistence import InMemoryUserStore

WHEN = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _snapshot(**results: bool) -> UserStateSnapshot:
    return UserStateSnapshot(
        user_id="1",
        completed_tasks={
            task_id: TaskResult(task_id=task_id, passed=passed, completed_at=WHEN)
            for task_id, passed in results.items()
        },
    )


def test_fresh_user_starts_at_first_task(small_flow: Flow) -> None:
    position = compute_current_position(small_flow, _snapshot())
    assert position.step_index == 0
    assert position.task.id == "exam"
    assert compute_user_status(small_flow, _snapshot()) == UserStatus.IN_PROGRESS


def test_next_task_after_passes(small_flow: Flow) -> None:
    position = compute_current_position(small_flow, _snapshot(exam=True, schedule=True))
    assert position.step_index == 1
    assert position.step.id == "interview"
    assert position.task.id == "perform"


def test_failed_task_takes_priority_over_unattempted(small_flow: Flow) -> None:
    position = compute_current_position(small_flow, _snapshot(exam=True, schedule=True, perform=False))
    assert position.task.id == "perform"

    earlier_failure = _snapshot(exam=False)
    assert compute_current_position(small_flow, earlier_failure).task.id == "exam"


def test_failure_means_rejected(small_flow: Flow) -> None:
    assert compute_user_status(small_flow, _snapshot(exam=False)) == UserStatus.REJECTED
    assert (
        compute_user_status(small_flow, _snapshot(exam=True, schedule=True, perform=False))
        == UserStatus.REJECTED
    )


def test_failure_on_unknown_task_still_rejects(small_flow: Flow) -> None:
    assert compute_user_status(small_flow, _snapshot(retired=False)) == UserStatus.REJECTED


def test_all_passed_means_accepted_and_no_position(small_flow: Flow) -> None:
    snapshot = _snapshot(exam=True, schedule=True, perform=True)
    assert compute_user_status(small_flow, snapshot) == UserStatus.ACCEPTED
    assert compute_current_position(small_flow, snapshot) is None


def test_implicit_steps_are_skipped_and_keep_their_index(small_flow: Flow) -> None:
    flow = Flow(
        id="f",
        name="F",
        steps=(Step(id="welcome", name="Welcome"), *small_flow.steps),
    )
    position = compute_current_position(flow, _snapshot())
    assert position.step_index == 1
    assert position.task.id == "exam"
    assert compute_user_status(flow, _snapshot(exam=True, schedule=True, perform=True)) == (
        UserStatus.ACCEPTED
    )


def test_empty_flow_is_accepted() -> None:
    flow = Flow(id="f", name="F")
    assert compute_user_status(flow, _snapshot()) == UserStatus.ACCEPTED
    assert compute_current_position(flow, _snapshot()) is None


def test_summary_counts(small_flow: Flow) -> None:
    summary = summarize_progress(small_flow, _snapshot(exam=True))
    assert summary.completed_tasks == 1
    assert summary.total_tasks == 3
    assert summary.position.task.id == "schedule"
    assert not summary.is_complete


class TestUserServiceQueries:
    """UserService wraps the calculators with a fresh snapshot per call."""

    def test_current_position_and_status_follow_the_store(
        self, small_flow: Flow, store: InMemoryUserStore
    ) -> None:
        service = UserService(small_flow, store)
        user_id = service.create_user("a@example.com").unwrap().id
        assert service.current_position(user_id).task.id == "exam"

        store.add_task_result(user_id, TaskResult(task_id="exam", passed=True, completed_at=WHEN))
        position = service.current_position(user_id)
        assert (position.step_index, position.task.id) == (1, "schedule")
        assert service.user_status(user_id) == UserStatus.IN_PROGRESS

    def test_unknown_user(self, small_flow: Flow, store: InMemoryUserStore) -> None:
        service = UserService(small_flow, store)
        assert service.current_position("99").task.id == "exam"
        assert isinstance(service.progress_for("99").error, UserNotFoundException)
        assert isinstance(service.status_for("99").error, UserNotFoundException)
