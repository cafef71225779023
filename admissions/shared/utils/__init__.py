"""Shared utilities: datetime helpers and timestamp resolution."""

from admissions.shared.utils.datetime import (
    EPOCH_SECONDS_CUTOFF_MS,
    ensure_utc,
    from_timestamp_ms_utc,
    from_timestamp_utc,
    resolve_timestamp,
    utc_now,
)

__all__ = [
    "EPOCH_SECONDS_CUTOFF_MS",
    "utc_now",
    "ensure_utc",
    "from_timestamp_utc",
    "from_timestamp_ms_utc",
    "resolve_timestamp",
]
