"""Persistence adapters. State lives for the process lifetime only."""

from admissions.infrastructure.persistence.memory import InMemoryUserStore

__all__ = ["InMemoryUserStore"]
