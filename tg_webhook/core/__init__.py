"""Core application functionality."""

from .errors import (
    LoggingFailure,
    MalformedBody,
    MethodNotAllowed,
    Unauthorized,
    WebhookError,
)
from .logging import (
    CorrelationIdMiddleware,
    RequestLoggingMiddleware,
    get_logger,
    install_middlewares,
    setup_logging,
)
from .settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "CorrelationIdMiddleware",
    "RequestLoggingMiddleware",
    "install_middlewares",
    "WebhookError",
    "MethodNotAllowed",
    "Unauthorized",
    "MalformedBody",
    "LoggingFailure",
]
