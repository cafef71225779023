"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from admissions.shared.telemetry import get_logger, setup_logging
from admissions.shared.utils import (
    ensure_utc,
    from_timestamp_ms_utc,
    from_timestamp_utc,
    resolve_timestamp,
    utc_now,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "utc_now",
    "ensure_utc",
    "from_timestamp_utc",
    "from_timestamp_ms_utc",
    "resolve_timestamp",
]
