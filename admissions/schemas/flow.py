"""Flow API schemas: steps and tasks as exposed to clients."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from admissions.domain.entities.flow import Flow, Step, Task


class TaskResponse(BaseModel):
    """One task with its rules in descriptor form."""

    id: str
    name: str
    required_fields: list[str] = Field(default_factory=list)
    pass_condition: dict[str, Any] | None = None
    visibility_condition: dict[str, Any] | None = None
    redoable: bool = True

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            id=task.id,
            name=task.name,
            required_fields=sorted(task.required_fields),
            pass_condition=task.pass_condition.to_dict() if task.pass_condition else None,
            visibility_condition=(
                task.visibility_condition.to_dict() if task.visibility_condition else None
            ),
            redoable=task.redoable,
        )


class StepResponse(BaseModel):
    """A step and its tasks, in flow order."""

    id: str
    name: str
    tasks: list[TaskResponse] = Field(default_factory=list)

    @classmethod
    def from_step(cls, step: Step) -> StepResponse:
        return cls(
            id=step.id,
            name=step.name,
            tasks=[TaskResponse.from_task(t) for t in step.tasks],
        )


class FlowResponse(BaseModel):
    """The whole flow definition."""

    id: str
    name: str
    steps: list[StepResponse] = Field(default_factory=list)

    @classmethod
    def from_flow(cls, flow: Flow) -> FlowResponse:
        return cls(
            id=flow.id,
            name=flow.name,
            steps=[StepResponse.from_step(s) for s in flow.steps],
        )
