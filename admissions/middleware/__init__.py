"""HTTP middleware: request ID and correlation ID.

Applied in main app; order matters (first added = outermost).
Import and use from admissions.main.
"""

from admissions.middleware.request_context import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
)

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
]
