"""Core: config, rate limits, and application bootstrap.

Single place for settings and app wiring helpers.
"""

from admissions.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
