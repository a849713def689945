"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (negotiated error responses)
- Request size limit middleware
- Logging configuration

No business logic belongs here.
"""

import uvicorn
from fastapi import FastAPI

from account.core.config import settings
from account.interfaces.health import router as health_router
from account.shared.errors.handlers import register_error_handlers
from account.shared.logging import configure_logging
from account.shared.security.request_size import RequestSizeLimitMiddleware


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, fmt=settings.log_format)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Middleware ---
    app.add_middleware(
        RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run("account.main:app", host="127.0.0.1", port=8000, reload=settings.debug)


if __name__ == "__main__":
    run()
