"""Domain value objects and shared value types."""

from admissions.domain.value_objects.condition import ALWAYS, Condition, evaluate

__all__ = [
    "ALWAYS",
    "Condition",
    "evaluate",
]
