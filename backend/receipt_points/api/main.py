"""Entry point for the FastAPI application.

This module constructs the FastAPI app, attaches the receipt store,
registers exception handlers and routers, and sets up startup and
shutdown events. ``create_app`` builds independent instances (each
with its own store unless one is passed in), which is what the tests
use; ``app`` is the module-level instance served by uvicorn.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from receipt_points.api.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import settings
from receipt_points.core.observability import init_sentry, sentry_set_tags
from receipt_points.services.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=(settings.LOG_LEVEL or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting up %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown
    logger.info("Shutting down; discarding %d stored receipts", len(app.state.receipt_store))
    app.state.receipt_store.clear()


def _cors_origins() -> list[str]:
    """Allow everything in development, otherwise the configured origins (deduplicated)."""
    if settings.is_development:
        return ["*"]
    seen: set[str] = set()
    return [o for o in settings.BACKEND_CORS_ORIGINS if not (o in seen or seen.add(o))]


def create_app(store: Optional[ReceiptStore] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.receipt_store = store if store is not None else ReceiptStore()

    @app.middleware("http")
    async def sentry_context_middleware(request: Request, call_next):
        sentry_set_tags({"path": request.url.path, "method": request.method})
        return await call_next(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register custom exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(receipts_router)

    @app.api_route("/health", methods=["GET", "HEAD"])
    async def health_check():
        """Health check endpoint (supports GET & HEAD)."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "receipts": len(app.state.receipt_store),
        }

    return app


configure_logging()
app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port.

    uvicorn logs bind failures itself and exits with status 1.
    """
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
