"""Loads the flow document from JSON and compiles it into domain entities.

Any failure (unreadable file, malformed JSON, schema mismatch, unknown
condition kind) raises ConfigurationError; the application must not start
with a partially loaded flow.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from admissions.application.services.condition_compiler import compile_condition
from admissions.domain.entities.flow import Flow, Step, Task
from admissions.domain.enums import ConditionRole
from admissions.domain.exceptions import ConfigurationError
from admissions.infrastructure.flow.document import FlowDocument, TaskDocument
from admissions.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _build_task(doc: TaskDocument) -> Task:
    pass_condition = compile_condition(
        doc.pass_condition.descriptor() if doc.pass_condition else None,
        ConditionRole.PASS,
        task_id=doc.id,
    )
    visibility_condition = compile_condition(
        doc.visibility_condition.descriptor() if doc.visibility_condition else None,
        ConditionRole.VISIBILITY,
        task_id=doc.id,
    )
    return Task(
        id=doc.id,
        name=doc.name,
        required_fields=frozenset(doc.required_fields),
        pass_condition=pass_condition,
        visibility_condition=visibility_condition,
        redoable=True if doc.redoable is None else doc.redoable,
    )


def build_flow(document: FlowDocument) -> Flow:
    """Compile a validated flow document into an immutable Flow."""
    try:
        steps = tuple(
            Step(
                id=step.id,
                name=step.name,
                tasks=tuple(_build_task(t) for t in step.tasks),
            )
            for step in document.steps
        )
        return Flow(id=document.id, name=document.name, steps=steps)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid flow definition: {exc}") from exc


def load_flow_from_dict(data: dict[str, Any]) -> Flow:
    """Validate and compile an already-parsed flow document."""
    try:
        document = FlowDocument.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Flow definition does not match the expected schema",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc
    return build_flow(document)


def load_flow(path: str | Path) -> Flow:
    """Read, validate, and compile the flow document at path.

    Args:
        path: JSON file with the flow definition.

    Returns:
        The compiled Flow.

    Raises:
        ConfigurationError: If the file cannot be read or compiled.
    """
    flow_path = Path(path)
    try:
        data = json.loads(flow_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read flow definition: {flow_path}", path=str(flow_path)
        ) from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Flow definition is not valid JSON: {exc}", path=str(flow_path)
        ) from exc
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Flow definition must be a JSON object", path=str(flow_path)
        )

    flow = load_flow_from_dict(data)
    logger.info(
        "Flow loaded: %s (%d steps, %d tasks) from %s",
        flow.id,
        len(flow.steps),
        flow.task_count,
        flow_path,
    )
    return flow
