"""Application DTOs (no web or persistence dependency)."""

from admissions.application.dtos.outcome import Outcome
from admissions.application.dtos.progress import (
    CurrentPosition,
    ProgressSummary,
    TaskCompletionResult,
    TaskOutcome,
)

__all__ = [
    "CurrentPosition",
    "Outcome",
    "ProgressSummary",
    "TaskCompletionResult",
    "TaskOutcome",
]
