"""Shared telemetry: logging setup and logger lookup."""

from admissions.shared.telemetry.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
]
