"""Application services: condition compilation, progress calculation, validation, users."""

from admissions.application.services.condition_compiler import compile_condition
from admissions.application.services.progress_calculator import (
    compute_current_position,
    compute_user_status,
    summarize_progress,
    visible_steps,
)
from admissions.application.services.task_completion_validator import (
    check_redoable,
    check_required_fields,
    check_task_order,
    resolve_visible_task,
)
from admissions.application.services.user_service import UserService

__all__ = [
    "UserService",
    "check_redoable",
    "check_required_fields",
    "check_task_order",
    "compile_condition",
    "compute_current_position",
    "compute_user_status",
    "resolve_visible_task",
    "summarize_progress",
    "visible_steps",
]
