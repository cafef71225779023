"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

import math
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from email.utils import parsedate_to_datetime
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

# 2000-01-01T00:00:00Z in epoch milliseconds. Numeric timestamps below this
# are read as epoch seconds, everything else as epoch milliseconds.
EPOCH_SECONDS_CUTOFF_MS = 946_684_800_000

# Extended-format instant: date, "T", full time, optional fraction, and Z or ±HH:MM.
_ISO_INSTANT_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,9})?(Z|[+-]\d{2}:\d{2})"
)


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """
    Create a UTC-aware datetime from a Unix timestamp in seconds.

    Counts from the epoch instead of calling datetime.fromtimestamp(), so
    negative values behave the same on every platform.
    """
    return _EPOCH + timedelta(seconds=timestamp)


def from_timestamp_ms_utc(timestamp_ms: int) -> datetime:
    """
    Create a UTC-aware datetime from a millisecond Unix timestamp.
    Common in JavaScript/APIs that use milliseconds.
    """
    return _EPOCH + timedelta(milliseconds=timestamp_ms)


def parse_iso_instant(value: str) -> datetime | None:
    """Parse a strict ISO-8601 instant (offset or 'Z' required). None if not one."""
    if not _ISO_INSTANT_PATTERN.fullmatch(value):
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed.astimezone(UTC)


def parse_rfc1123(value: str) -> datetime | None:
    """Parse an RFC-1123 date-time (e.g. 'Wed, 10 Dec 2025 15:00:00 GMT'). None on failure."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return None
    return ensure_utc(parsed)


def resolve_timestamp(
    raw: Any,
    now: Callable[[], datetime] = utc_now,
) -> datetime:
    """
    Resolve a submitted ``timestamp`` value to a UTC datetime.

    - None or an unsupported type: current time.
    - "now" (any case, surrounding whitespace ignored): current time.
    - Other strings: ISO-8601 instant, then RFC-1123; current time if
      neither parses. Parse failures are never surfaced.
    - Numbers (truncated to an integer): below EPOCH_SECONDS_CUTOFF_MS they
      are epoch seconds, otherwise epoch milliseconds. Small millisecond
      values are therefore read as seconds.

    Args:
        raw: Value of the payload's ``timestamp`` key.
        now: Clock used for every fallback.

    Returns:
        Timezone-aware datetime in UTC
    """
    if raw is None or isinstance(raw, bool):
        return now()

    if isinstance(raw, str):
        if raw.strip().lower() == "now":
            return now()
        return parse_iso_instant(raw) or parse_rfc1123(raw) or now()

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            return now()
        value = int(raw)
        try:
            if value < EPOCH_SECONDS_CUTOFF_MS:
                return from_timestamp_utc(value)
            return from_timestamp_ms_utc(value)
        except OverflowError:
            return now()

    return now()
