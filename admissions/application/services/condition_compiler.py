"""Compiles declarative condition descriptors into Condition values.

Runs once per descriptor while the flow loads. Pass conditions may use any
known kind; visibility conditions only ``always``. Anything else is a
ConfigurationError, which stops the flow from loading.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from admissions.domain.enums import ConditionKind, ConditionRole
from admissions.domain.exceptions import ConfigurationError
from admissions.domain.value_objects.condition import ALWAYS, Condition

_ALLOWED_KINDS: dict[ConditionRole, frozenset[ConditionKind]] = {
    ConditionRole.PASS: frozenset(
        {
            ConditionKind.ALWAYS,
            ConditionKind.SCORE_GREATER_THAN,
            ConditionKind.EQUALS,
        }
    ),
    ConditionRole.VISIBILITY: frozenset({ConditionKind.ALWAYS}),
}


def compile_condition(
    descriptor: Mapping[str, Any] | None,
    role: ConditionRole,
    *,
    task_id: str | None = None,
) -> Condition | None:
    """Build a Condition from a descriptor such as ``{"type": "equals", ...}``.

    Args:
        descriptor: Parsed descriptor; None means no condition (always true).
        role: Whether the condition judges a payload or a user snapshot.
        task_id: Owning task, used only in error messages.

    Returns:
        The compiled condition, or None when no descriptor was given.

    Raises:
        ConfigurationError: Unknown kind, kind not allowed for role, or
            missing/invalid parameters.
    """
    if descriptor is None:
        return None

    raw_kind = descriptor.get("type")
    try:
        kind = ConditionKind(raw_kind)
    except ValueError:
        raise ConfigurationError(
            f"Unknown {role.value} condition type: {raw_kind!r}",
            task_id=task_id,
            condition_type=raw_kind,
        ) from None

    if kind not in _ALLOWED_KINDS[role]:
        raise ConfigurationError(
            f"Unknown {role.value} condition type: {raw_kind!r}",
            task_id=task_id,
            condition_type=raw_kind,
        )

    if kind == ConditionKind.ALWAYS:
        return ALWAYS

    try:
        return Condition(
            kind=kind,
            field=descriptor.get("field"),
            value=descriptor.get("value"),
            threshold=descriptor.get("threshold"),
        )
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid {role.value} condition for task {task_id!r}: {exc}",
            task_id=task_id,
            condition_type=raw_kind,
        ) from exc
