"""Application use cases: one entry point per workflow."""

from admissions.application.use_cases.tasks import CompleteTaskUseCase

__all__ = ["CompleteTaskUseCase"]
