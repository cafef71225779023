"""Domain entities and aggregates.

Pure domain models; no web or persistence concerns.
"""

from admissions.domain.entities.flow import Flow, Step, Task
from admissions.domain.entities.user import TaskResult, User, UserStateSnapshot

__all__ = [
    "Flow",
    "Step",
    "Task",
    "TaskResult",
    "User",
    "UserStateSnapshot",
]
