"""Telegram webhook endpoint.

Acknowledges Telegram Bot API updates quickly so Telegram stops retrying.
The update itself is treated as opaque: it is parsed, optionally logged on
preview deployments, and dropped.
"""

import json
from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import Response

from tg_webhook.core.errors import (
    LoggingFailure,
    MalformedBody,
    MethodNotAllowed,
    Unauthorized,
    WebhookError,
)
from tg_webhook.core.logging import get_logger
from tg_webhook.core.responses import JSONResponse
from tg_webhook.core.security import extract_provided_secret, verify_webhook_secret
from tg_webhook.core.settings import Settings
from tg_webhook.observability.metrics import (
    WebhookOutcome,
    update_log_failures_total,
    webhook_requests_total,
)

WEBHOOK_PATH = "/api/telegram"
WEBHOOK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_update(body: bytes) -> Any:
    """Parse a request body as strict JSON (no NaN or Infinity literals)."""
    return json.loads(body, parse_constant=_reject_constant)


def render_update(update: Any) -> str:
    """Serialize an update for the diagnostic log."""
    return json.dumps(update, ensure_ascii=False)


class WebhookEndpoint:
    """Terminates Telegram webhook calls with a fixed acknowledgment."""

    def __init__(self, settings: Settings):
        self.expected_secret = settings.telegram_webhook_secret or None
        self.log_updates = settings.is_preview

    async def handle(self, request: Request) -> Response:
        """Handle one webhook request; every input maps to exactly one response."""
        try:
            update = await self._accept(request)
        except WebhookError as exc:
            webhook_requests_total.labels(outcome=exc.outcome.value).inc()
            return exc.to_response()

        self._log_update(update)

        webhook_requests_total.labels(outcome=WebhookOutcome.ACCEPTED.value).inc()
        return JSONResponse({"ok": True})

    async def _accept(self, request: Request) -> Any:
        if request.method != "POST":
            raise MethodNotAllowed()

        # Query parameter wins, the header is only a fallback
        if self.expected_secret:
            provided = extract_provided_secret(request.query_params, request.headers)
            if not verify_webhook_secret(provided, self.expected_secret):
                raise Unauthorized()

        try:
            return parse_update(await request.body())
        except (ValueError, RecursionError) as exc:
            raise MalformedBody(str(exc)) from exc

    def _log_update(self, update: Any) -> None:
        if not self.log_updates:
            return

        try:
            self._emit_update(update)
        except LoggingFailure:
            update_log_failures_total.inc()

    def _emit_update(self, update: Any) -> None:
        try:
            logger.info("Telegram update", update=render_update(update))
        except Exception as exc:
            raise LoggingFailure(str(exc)) from exc


def build_router(settings: Settings) -> APIRouter:
    """Create the webhook router bound to the given settings."""
    router = APIRouter(tags=["telegram-webhooks"])
    endpoint = WebhookEndpoint(settings)

    # Every verb is routed here so the handler owns the 405
    router.add_route(
        WEBHOOK_PATH,
        endpoint.handle,
        methods=WEBHOOK_METHODS,
        name="telegram_webhook",
    )
    return router
