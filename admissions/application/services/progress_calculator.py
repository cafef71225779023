"""Position and status calculators: pure functions over (Flow, snapshot).

Visibility is recomputed from the snapshot on every call. Nothing here
writes to the store or knows about redoability.
"""

from __future__ import annotations

from admissions.application.dtos.progress import CurrentPosition, ProgressSummary
from admissions.domain.entities.flow import Flow, Step
from admissions.domain.entities.user import UserStateSnapshot
from admissions.domain.enums import UserStatus


def visible_steps(flow: Flow, snapshot: UserStateSnapshot) -> tuple[Step, ...]:
    """Return all steps narrowed to the tasks visible for this snapshot."""
    return flow.visible_steps(snapshot)


def compute_current_position(
    flow: Flow, snapshot: UserStateSnapshot
) -> CurrentPosition | None:
    """Return the task the user should act on next, or None when finished.

    Two passes over the visible tasks in flow order:
    1. the first task whose latest result is failing (retries come first,
       even across step boundaries);
    2. otherwise the first task with no result at all.
    A failed non-redoable task is still returned by pass 1.
    """
    steps = visible_steps(flow, snapshot)

    for index, step in enumerate(steps):
        for task in step.tasks:
            result = snapshot.result_for(task.id)
            if result is not None and not result.passed:
                return CurrentPosition(step_index=index, step=step, task=task)

    for index, step in enumerate(steps):
        for task in step.tasks:
            if snapshot.result_for(task.id) is None:
                return CurrentPosition(step_index=index, step=step, task=task)

    return None


def compute_user_status(flow: Flow, snapshot: UserStateSnapshot) -> UserStatus:
    """Derive the aggregate status.

    Rejection looks at every stored result, visible or not; acceptance
    requires a passing result for every currently visible task.
    """
    if snapshot.has_failure():
        return UserStatus.REJECTED

    all_passed = all(
        snapshot.has_passed(task.id)
        for step in visible_steps(flow, snapshot)
        for task in step.tasks
    )
    return UserStatus.ACCEPTED if all_passed else UserStatus.IN_PROGRESS


def summarize_progress(flow: Flow, snapshot: UserStateSnapshot) -> ProgressSummary:
    """Current position plus counts: stored results vs. visible tasks."""
    total = sum(len(step.tasks) for step in visible_steps(flow, snapshot))
    return ProgressSummary(
        user_id=snapshot.user_id,
        position=compute_current_position(flow, snapshot),
        completed_tasks=len(snapshot.completed_tasks),
        total_tasks=total,
    )
