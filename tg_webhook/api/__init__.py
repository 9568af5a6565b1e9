"""API package initialization."""

from fastapi import APIRouter

from tg_webhook.api.health import router as health_router
from tg_webhook.api.metrics import router as metrics_router
from tg_webhook.api.webhooks.telegram import build_router as build_telegram_router
from tg_webhook.core.settings import Settings


def build_api_router(settings: Settings) -> APIRouter:
    """Assemble every router of the service."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(metrics_router, tags=["metrics"])
    api_router.include_router(build_telegram_router(settings))
    return api_router
