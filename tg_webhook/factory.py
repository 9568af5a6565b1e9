"""Application factory for creating FastAPI instances."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from tg_webhook import __version__
from tg_webhook.core.logging import get_logger, install_middlewares, setup_logging
from tg_webhook.core.responses import JSONResponse
from tg_webhook.core.settings import Settings, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting webhook service",
        version=__version__,
        secret_required=settings.secret_required,
        preview=settings.is_preview,
    )

    yield

    logger.info("Shutting down webhook service")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory with settings injection.

    Args:
        settings: Optional settings instance. If None, reads from environment.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)

    app = FastAPI(
        title="Telegram Webhook",
        version=__version__,
        description="Acknowledges Telegram Bot API webhook updates",
        lifespan=lifespan,
    )

    # Store settings in app state for dependency injection
    app.state.settings = settings

    install_middlewares(app)
    setup_routes(app, settings)
    setup_error_handlers(app)

    return app


def setup_routes(app: FastAPI, settings: Settings):
    """Configure application routes."""
    from tg_webhook.api import build_api_router

    app.include_router(build_api_router(settings))


def setup_error_handlers(app: FastAPI):
    """Configure error handlers."""

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=404, content={"ok": False, "error": "not found"}
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=500, content={"ok": False, "error": "internal server error"}
        )
