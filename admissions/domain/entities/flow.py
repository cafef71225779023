"""Flow domain entities: the static, immutable shape of the admissions process.

A flow is an ordered list of steps; a step is an ordered list of tasks.
Entities are built once at startup (see the flow loader) and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from admissions.domain.value_objects.condition import Condition, evaluate

if TYPE_CHECKING:
    from admissions.domain.entities.user import UserStateSnapshot


def _require(value: str, what: str) -> None:
    if not value or not value.strip():
        raise ValueError(f"{what} cannot be blank")


@dataclass(frozen=True)
class Task:
    """Smallest unit of work in the flow.

    Task ids must be unique across the whole flow; this holds by convention
    of the flow document and is not checked here.
    """

    id: str
    name: str
    required_fields: frozenset[str] = field(default_factory=frozenset)
    pass_condition: Condition | None = None
    visibility_condition: Condition | None = None
    redoable: bool = True

    def __post_init__(self) -> None:
        _require(self.id, "Task id")
        _require(self.name, "Task name")
        object.__setattr__(self, "required_fields", frozenset(self.required_fields))

    def matches(self, identifier: str) -> bool:
        """Return whether identifier equals this task's id or name (case-insensitive)."""
        wanted = identifier.casefold()
        return self.id.casefold() == wanted or self.name.casefold() == wanted

    def evaluate_passed(self, payload: Mapping[str, Any]) -> bool:
        """Apply the pass condition; without one, any payload passes."""
        return evaluate(self.pass_condition, payload)

    def is_visible(self, snapshot: UserStateSnapshot) -> bool:
        """Apply the visibility condition; without one, the task is always visible."""
        return evaluate(self.visibility_condition, snapshot)

    def missing_fields(self, payload: Mapping[str, Any] | None) -> frozenset[str]:
        """Return every required field name absent from the payload keys."""
        if not self.required_fields:
            return frozenset()
        keys = payload.keys() if payload else ()
        return frozenset(f for f in self.required_fields if f not in keys)


@dataclass(frozen=True)
class Step:
    """Ordered phase of the flow.

    A step without tasks stands for one implicit task: renderers show it as a
    single unit, but there is nothing to complete, so position and status
    calculations skip it.
    """

    id: str
    name: str
    tasks: tuple[Task, ...] = ()

    def __post_init__(self) -> None:
        _require(self.id, "Step id")
        _require(self.name, "Step name")
        object.__setattr__(self, "tasks", tuple(self.tasks))

    @property
    def is_implicit(self) -> bool:
        return not self.tasks

    def visible_tasks(self, snapshot: UserStateSnapshot) -> tuple[Task, ...]:
        return tuple(t for t in self.tasks if t.is_visible(snapshot))

    def with_tasks(self, tasks: tuple[Task, ...]) -> Step:
        return Step(id=self.id, name=self.name, tasks=tasks)


@dataclass(frozen=True)
class Flow:
    """The whole process definition: an ordered, immutable list of steps."""

    id: str
    name: str
    steps: tuple[Step, ...] = ()

    def __post_init__(self) -> None:
        _require(self.id, "Flow id")
        _require(self.name, "Flow name")
        object.__setattr__(self, "steps", tuple(self.steps))

    def iter_tasks(self) -> Iterator[tuple[int, Step, Task]]:
        """Yield (step_index, step, task) in flow order."""
        for index, step in enumerate(self.steps):
            for task in step.tasks:
                yield index, step, task

    def find_step_containing(self, task_id: str) -> tuple[int, Step] | None:
        """Return (index, step) for the step that holds task_id, or None."""
        for index, step, task in self.iter_tasks():
            if task.id == task_id:
                return index, step
        return None

    def visible_steps(self, snapshot: UserStateSnapshot) -> tuple[Step, ...]:
        """Return every step, each narrowed to the tasks visible for snapshot."""
        return tuple(step.with_tasks(step.visible_tasks(snapshot)) for step in self.steps)

    @property
    def task_count(self) -> int:
        return sum(len(step.tasks) for step in self.steps)
