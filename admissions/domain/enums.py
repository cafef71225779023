"""Domain enumerations for the admissions application.

Enums represent fixed sets of domain values (user status, condition kinds).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserStatus(_ValuesMixin, str, Enum):
    """Aggregate outcome of a user's progress through the flow."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    IN_PROGRESS = "in_progress"


class ConditionKind(_ValuesMixin, str, Enum):
    """Condition descriptor kinds understood by the compiler.

    The value is the ``type`` tag used in the flow document.
    """

    ALWAYS = "always"
    SCORE_GREATER_THAN = "scoreGreaterThan"
    EQUALS = "equals"


class ConditionRole(_ValuesMixin, str, Enum):
    """Where a condition is applied: to a submitted payload or to user state."""

    PASS = "pass"
    VISIBILITY = "visibility"
