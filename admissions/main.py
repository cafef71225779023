"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See admissions.core.lifespan and
admissions.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from admissions.api.v1 import api_router
from admissions.core.config import get_settings
from admissions.core.exception_handlers import register_exception_handlers
from admissions.core.lifespan import create_lifespan
from admissions.core.limiter import limiter
from admissions.middleware import CorrelationIDMiddleware, RequestIDMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Middleware: first added = innermost. Request ID runs before correlation ID.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        CorrelationIDMiddleware,
        header_name=settings.correlation_id_header,
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("admissions.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
