"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from admissions.domain.entities import (
    Flow,
    Step,
    Task,
    TaskResult,
    User,
    UserStateSnapshot,
)
from admissions.domain.enums import ConditionKind, ConditionRole, UserStatus
from admissions.domain.exceptions import (
    AdmissionsException,
    ConfigurationError,
    DuplicateUserException,
    MissingRequiredFieldsException,
    TaskAlreadyCompletedException,
    TaskNotFoundException,
    TaskOrderViolationException,
    UserNotFoundException,
)
from admissions.domain.value_objects import ALWAYS, Condition

__all__ = [
    # Entities
    "Flow",
    "Step",
    "Task",
    "TaskResult",
    "User",
    "UserStateSnapshot",
    # Enums
    "ConditionKind",
    "ConditionRole",
    "UserStatus",
    # Exceptions
    "AdmissionsException",
    "ConfigurationError",
    "DuplicateUserException",
    "MissingRequiredFieldsException",
    "TaskAlreadyCompletedException",
    "TaskNotFoundException",
    "TaskOrderViolationException",
    "UserNotFoundException",
    # Value objects
    "ALWAYS",
    "Condition",
]
