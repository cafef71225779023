"""Flow document schema: the JSON shape authored for the admissions flow.

Field names follow the document (camelCase); models accept either form.
Unknown keys are ignored so authoring notes do not break loading.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConditionDocument(BaseModel):
    """One condition descriptor: ``type`` plus kind-specific parameters."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = Field(..., min_length=1)
    field: str | None = None
    value: str | None = None
    threshold: float | None = None
    task_id: str | None = Field(default=None, alias="taskId")
    min: float | None = None
    max: float | None = None

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value_to_text(cls, v: Any) -> Any:
        """Scalars are compared as text, so store them that way."""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def descriptor(self) -> dict[str, Any]:
        """Return the descriptor mapping consumed by the condition compiler."""
        return self.model_dump(exclude_none=True)


class TaskDocument(BaseModel):
    """Task entry inside a step."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    required_fields: list[str] = Field(default_factory=list, alias="requiredFields")
    pass_condition: ConditionDocument | None = Field(default=None, alias="passCondition")
    visibility_condition: ConditionDocument | None = Field(
        default=None, alias="visibilityCondition"
    )
    redoable: bool | None = None


class StepDocument(BaseModel):
    """Step entry: ordered tasks."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    tasks: list[TaskDocument] = Field(default_factory=list)


class FlowDocument(BaseModel):
    """Root of the flow document."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    steps: list[StepDocument]
