"""In-memory persistence (process lifetime only)."""

from admissions.infrastructure.persistence.memory.user_store import (
    InMemoryUserStore,
    normalize_email,
)

__all__ = ["InMemoryUserStore", "normalize_email"]
