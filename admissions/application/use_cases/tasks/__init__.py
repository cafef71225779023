"""Task use cases: complete a task for a user."""

from admissions.application.use_cases.tasks.complete_task import CompleteTaskUseCase

__all__ = ["CompleteTaskUseCase"]
