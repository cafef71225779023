"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The flow definition path is validated at load time;
the file itself is read once by the lifespan.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FLOW_PATH = Path(__file__).resolve().parent.parent / "infrastructure" / "flow" / "flow.json"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "admissions"
    app_version: str = "1.0.0"
    debug: bool = False

    # Flow definition (JSON document compiled at startup)
    flow_definition_path: str = str(DEFAULT_FLOW_PATH)

    # Hold the per-user lock across snapshot -> validate -> commit.
    # When False only the single result write is locked (last write wins).
    serialize_user_transactions: bool = True

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # Rate limits (SlowAPI limit strings)
    rate_limit_enabled: bool = True
    create_user_rate_limit: str = "30/minute"
    complete_task_rate_limit: str = "240/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_flow_definition(self) -> "Settings":
        """Reject an empty flow path; existence is checked when the flow loads."""
        if not self.flow_definition_path.strip():
            raise ValueError(
                "FLOW_DEFINITION_PATH must not be empty. "
                "Unset it to use the bundled admissions flow."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
