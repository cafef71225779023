"""Tests for resolve_timestamp and the UTC datetime helpers."""

from datetime import datetime, timezone

import pytest

from admissions.shared.utils.datetime import (
    EPOCH_SECONDS_CUTOFF_MS,
    ensure_utc,
    resolve_timestamp,
)

NOW = datetime(2025, 6, 1, 9, 30, tzinfo=timezone.utc)


def _clock() -> datetime:
    return NOW


@pytest.mark.parametrize("raw", [None, "now", " NOW ", True, False, [1], {"a": 1}])
def test_fallbacks_to_now(raw) -> None:
    assert resolve_timestamp(raw, now=_clock) == NOW


def test_unparseable_string_falls_back_to_now() -> None:
    assert resolve_timestamp("yesterday-ish", now=_clock) == NOW


def test_iso_instant_with_z() -> None:
    assert resolve_timestamp("2024-03-01T10:00:00Z", now=_clock) == datetime(
        2024, 3, 1, 10, 0, tzinfo=timezone.utc
    )


def test_iso_offset_is_converted_to_utc() -> None:
    assert resolve_timestamp("2024-03-01T12:00:00+02:00", now=_clock) == datetime(
        2024, 3, 1, 10, 0, tzinfo=timezone.utc
    )


def test_iso_without_offset_falls_back_to_now() -> None:
    assert resolve_timestamp("2024-03-01T10:00:00", now=_clock) == NOW


def test_rfc1123() -> None:
    assert resolve_timestamp("Wed, 10 Dec 2025 15:00:00 GMT", now=_clock) == datetime(
        2025, 12, 10, 15, 0, tzinfo=timezone.utc
    )


def test_epoch_seconds_below_cutoff() -> None:
    assert resolve_timestamp(1_700_000_000, now=_clock) == datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
    )


def test_epoch_milliseconds_at_or_above_cutoff() -> None:
    assert resolve_timestamp(1_700_000_000_000, now=_clock) == datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
    )
    assert resolve_timestamp(EPOCH_SECONDS_CUTOFF_MS, now=_clock) == datetime(
        2000, 1, 1, tzinfo=timezone.utc
    )


def test_floats_are_truncated() -> None:
    assert resolve_timestamp(1_700_000_000.9, now=_clock) == datetime(
        2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc
    )


def test_small_numbers_read_as_seconds() -> None:
    assert resolve_timestamp(0, now=_clock) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", [float("nan"), float("inf"), 10**30])
def test_out_of_range_numbers_fall_back_to_now(raw) -> None:
    assert resolve_timestamp(raw, now=_clock) == NOW


def test_ensure_utc_attaches_timezone_to_naive() -> None:
    assert ensure_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert ensure_utc(None) is None


def test_threshold_boundary_examples() -> None:
    assert resolve_timestamp(946_684_799, now=_clock) == datetime(
        1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc
    )
    assert resolve_timestamp(946_684_800_001, now=_clock) == datetime(
        2000, 1, 1, 0, 0, 0, 1000, tzinfo=timezone.utc
    )
    assert resolve_timestamp("2025-12-10T15:00:00Z", now=_clock) == datetime(
        2025, 12, 10, 15, 0, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "raw",
    [
        "2025-12-10 15:00:00Z",
        "20251210T150000Z",
        "2025-12-10T15Z",
        "2025-12-10T15:00Z",
        "2025-12-10T15:00:00Z\n",
    ],
)
def test_non_canonical_iso_forms_fall_back_to_now(raw: str) -> None:
    assert resolve_timestamp(raw, now=_clock) == NOW


def test_iso_fraction_is_kept() -> None:
    assert resolve_timestamp("2025-12-10T15:00:00.250Z", now=_clock) == datetime(
        2025, 12, 10, 15, 0, 0, 250_000, tzinfo=timezone.utc
    )
