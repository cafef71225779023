"""Domain exceptions for the admissions application.

Defines domain-level errors that represent business rule violations.
These are independent of infrastructure concerns. Core operations return
them inside an Outcome; the presentation layer raises and maps them to
HTTP responses in exception handlers.
"""

from collections.abc import Iterable
from typing import Any


class AdmissionsException(Exception):
    """Base exception for all admissions application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. task, user_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ConfigurationError(AdmissionsException):
    """Raised when the flow definition cannot be loaded (fatal, startup only)."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class UserNotFoundException(AdmissionsException):
    """Raised when a requested user does not exist."""

    def __init__(self, user_id: str) -> None:
        """Initialize with the missing user identifier.

        Args:
            user_id: The user ID that was not found.
        """
        super().__init__(
            f"User not found: {user_id}",
            "USER_NOT_FOUND",
            {"user_id": user_id},
        )


class DuplicateUserException(AdmissionsException):
    """Raised when creating a user whose normalized email is already registered."""

    def __init__(self, email: str) -> None:
        """Initialize with the email as submitted (original case).

        Args:
            email: The email that collided with an existing user.
        """
        super().__init__(
            f"User with email already exists: {email}",
            "DUPLICATE_USER",
            {"email": email},
        )


class TaskNotFoundException(AdmissionsException):
    """Raised when no visible task matches the given id or name."""

    def __init__(self, task_identifier: str) -> None:
        super().__init__(
            f"Task not found: {task_identifier}",
            "TASK_NOT_FOUND",
            {"task": task_identifier},
        )


class MissingRequiredFieldsException(AdmissionsException):
    """Raised when a payload lacks one or more of a task's required fields."""

    def __init__(self, task_name: str, missing_fields: Iterable[str]) -> None:
        """Initialize with the task name and the complete missing set.

        Args:
            task_name: Human-readable name of the task.
            missing_fields: Every required field absent from the payload.
        """
        missing = sorted(missing_fields)
        self.missing_fields = frozenset(missing)
        super().__init__(
            f"Task '{task_name}' is missing required fields: {', '.join(missing)}",
            "MISSING_REQUIRED_FIELDS",
            {"task": task_name, "missing_fields": missing},
        )


class TaskOrderViolationException(AdmissionsException):
    """Raised when an earlier task in the same step has no passing result."""

    def __init__(self, task_name: str, prerequisite_task_name: str) -> None:
        """Initialize with the attempted task and the closest unmet prerequisite.

        Args:
            task_name: Task the caller tried to complete.
            prerequisite_task_name: Earlier task that must pass first.
        """
        self.prerequisite = prerequisite_task_name
        super().__init__(
            f"Cannot complete task '{task_name}' before completing "
            f"prerequisite task '{prerequisite_task_name}'",
            "TASK_ORDER_VIOLATION",
            {"task": task_name, "prerequisite": prerequisite_task_name},
        )


class TaskAlreadyCompletedException(AdmissionsException):
    """Raised when re-submitting a non-redoable task that already has a result."""

    def __init__(self, task_name: str) -> None:
        super().__init__(
            f"Task '{task_name}' has already been completed",
            "TASK_ALREADY_COMPLETED",
            {"task": task_name},
        )
