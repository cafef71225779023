"""Condition value object: a tagged rule evaluated against a payload or user state.

A condition is plain data (kind + parameters). Evaluation dispatches on the
kind through a fixed table, so conditions stay inspectable and serializable.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from admissions.domain.enums import ConditionKind


@dataclass(frozen=True)
class Condition:
    """Declarative rule compiled from a flow document descriptor.

    Attributes:
        kind: Which rule to apply.
        field: Payload key inspected by scoreGreaterThan / equals.
        value: Expected string form for equals.
        threshold: Exclusive lower bound for scoreGreaterThan.
    """

    kind: ConditionKind
    field: str | None = None
    value: str | None = None
    threshold: float | None = None

    def __post_init__(self) -> None:
        if self.kind in (ConditionKind.SCORE_GREATER_THAN, ConditionKind.EQUALS) and not self.field:
            raise ValueError(f"Condition '{self.kind.value}' requires a field")
        if self.kind == ConditionKind.SCORE_GREATER_THAN and self.threshold is None:
            raise ValueError("Condition 'scoreGreaterThan' requires a threshold")
        if self.kind == ConditionKind.EQUALS and self.value is None:
            raise ValueError("Condition 'equals' requires a value")

    def evaluate(self, context: Any) -> bool:
        """Apply this condition to a payload (pass) or a snapshot (visibility)."""
        return evaluate(self, context)

    def to_dict(self) -> dict[str, Any]:
        """Return the descriptor form (as written in the flow document)."""
        data: dict[str, Any] = {"type": self.kind.value}
        if self.field is not None:
            data["field"] = self.field
        if self.value is not None:
            data["value"] = self.value
        if self.threshold is not None:
            data["threshold"] = self.threshold
        return data


ALWAYS = Condition(ConditionKind.ALWAYS)


def _as_text(raw: Any) -> str:
    """String form used for comparisons (booleans as lowercase literals)."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    return str(raw)


def _always(condition: Condition, context: Any) -> bool:
    return True


def _score_greater_than(condition: Condition, payload: Mapping[str, Any]) -> bool:
    raw = (payload or {}).get(condition.field)
    if raw is None or isinstance(raw, bool):
        return False
    if isinstance(raw, (int, float)):
        # no float() cast: ints beyond float range would overflow
        return raw > condition.threshold
    try:
        return float(str(raw)) > condition.threshold
    except ValueError:
        return False


def _equals(condition: Condition, payload: Mapping[str, Any]) -> bool:
    payload = payload or {}
    if condition.field not in payload or payload[condition.field] is None:
        return False
    return _as_text(payload[condition.field]) == condition.value


_EVALUATORS: dict[ConditionKind, Callable[[Condition, Any], bool]] = {
    ConditionKind.ALWAYS: _always,
    ConditionKind.SCORE_GREATER_THAN: _score_greater_than,
    ConditionKind.EQUALS: _equals,
}


def evaluate(condition: Condition | None, context: Any) -> bool:
    """Evaluate a condition; an absent condition is always satisfied."""
    if condition is None:
        return True
    return _EVALUATORS[condition.kind](condition, context)
