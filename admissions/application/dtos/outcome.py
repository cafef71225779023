"""Outcome: explicit success-or-error return value for core operations.

Core operations report the named domain errors as values instead of raising
them. The HTTP layer calls ``unwrap()``, which raises the carried error into
the registered exception handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from admissions.domain.exceptions import AdmissionsException

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or an AdmissionsException, never both."""

    value: T | None = None
    error: AdmissionsException | None = None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: AdmissionsException) -> Outcome[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried domain error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
