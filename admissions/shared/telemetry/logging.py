"""Logging configuration for the application.

Every record carries the request and correlation IDs of the HTTP request
being served ("-" outside a request), set by the request-context middleware.
"""

import logging
import sys
from contextvars import ContextVar

from admissions.core.config import get_settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="-")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestContextFilter(logging.Filter):
    """Attach request_id and correlation_id to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        record.correlation_id = correlation_id_var.get()
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
