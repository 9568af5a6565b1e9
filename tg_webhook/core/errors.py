"""Webhook error taxonomy."""

from starlette.responses import PlainTextResponse, Response

from tg_webhook.core.responses import JSONResponse
from tg_webhook.observability.metrics import WebhookOutcome


class WebhookError(Exception):
    """Base class for webhook request failures that map to an HTTP response."""

    status_code: int = 500
    error: str = "internal error"
    outcome: WebhookOutcome | None = None

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.error)
        self.detail = detail

    def to_response(self) -> Response:
        return JSONResponse(
            status_code=self.status_code,
            content={"ok": False, "error": self.error},
        )


class MethodNotAllowed(WebhookError):
    """Request used a verb other than POST."""

    status_code = 405
    error = "Method Not Allowed"
    outcome = WebhookOutcome.METHOD_NOT_ALLOWED

    def to_response(self) -> Response:
        return PlainTextResponse(
            self.error, status_code=self.status_code, headers={"Allow": "POST"}
        )


class Unauthorized(WebhookError):
    """Shared secret missing or wrong."""

    status_code = 401
    error = "unauthorized"
    outcome = WebhookOutcome.UNAUTHORIZED


class MalformedBody(WebhookError):
    """Request body is not valid JSON."""

    status_code = 400
    error = "invalid json"
    outcome = WebhookOutcome.INVALID_JSON


class LoggingFailure(WebhookError):
    """Diagnostic logging of an update failed.

    Never rendered: the webhook handler discards it.
    """

    error = "logging failure"
