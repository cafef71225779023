"""Request and correlation ID middleware (raw ASGI).

Forwards a sanitized client X-Request-ID or generates one, and forwards
X-Correlation-ID or falls back to the request ID. Both are echoed on the
response and stored in context variables so log records carry them.
"""

import re
import uuid
from typing import Callable

from admissions.shared.telemetry.logging import correlation_id_var, request_id_var

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _sanitize_id(raw: str | None) -> str | None:
    """Return the stripped value if it is safe to log, else None."""
    if not raw or not REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return None
    return raw.strip()


def _echo_header(send: Callable, header_name: str, value: str) -> Callable:
    async def send_wrapper(message: dict) -> None:
        if message["type"] == "http.response.start":
            headers = list(message.get("headers", []))
            headers.append((header_name.encode(), value.encode()))
            message["headers"] = headers
        await send(message)

    return send_wrapper


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request ID on each request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = _sanitize_id(_get_header(scope, header_name)) or str(uuid.uuid4())
        scope.setdefault("state", {})["request_id"] = request_id
        token = request_id_var.set(request_id)
        try:
            await app(scope, receive, _echo_header(send, header_name, request_id))
        finally:
            request_id_var.reset(token)

    return asgi_app


def CorrelationIDMiddleware(
    app: Callable, header_name: str = "X-Correlation-ID"
) -> Callable:
    """Add or forward the correlation ID; falls back to the request ID."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = (
            _sanitize_id(_get_header(scope, header_name))
            or scope.get("state", {}).get("request_id")
            or str(uuid.uuid4())
        )
        scope.setdefault("state", {})["correlation_id"] = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            await app(scope, receive, _echo_header(send, header_name, correlation_id))
        finally:
            correlation_id_var.reset(token)

    return asgi_app
