"""Prometheus metrics configuration."""

from enum import Enum

from prometheus_client import Counter


class WebhookOutcome(str, Enum):
    """Terminal outcome of a webhook request."""

    METHOD_NOT_ALLOWED = "method_not_allowed"
    UNAUTHORIZED = "unauthorized"
    INVALID_JSON = "invalid_json"
    ACCEPTED = "accepted"


# Webhook metrics
webhook_requests_total = Counter(
    name="telegram_webhook_requests_total",
    documentation="Telegram webhook requests by outcome",
    labelnames=["outcome"],
)

update_log_failures_total = Counter(
    name="telegram_update_log_failures_total",
    documentation="Preview update logs that failed and were discarded",
)

# Pre-create label sets so every outcome is exported from startup
for _outcome in WebhookOutcome:
    webhook_requests_total.labels(outcome=_outcome.value)
