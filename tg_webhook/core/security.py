"""Webhook secret utilities."""

import hmac
from collections.abc import Mapping
from typing import Optional

SECRET_QUERY_PARAM = "secret"
SECRET_HEADER = "x-telegram-secret"


def extract_provided_secret(
    query_params: Mapping[str, str], headers: Mapping[str, str]
) -> Optional[str]:
    """Pick the secret a caller supplied.

    Args:
        query_params: Request query parameters
        headers: Request headers (case-insensitive mapping)

    Returns:
        The ``secret`` query parameter when present and non-empty, otherwise
        the ``x-telegram-secret`` header, otherwise None.
    """
    provided = query_params.get(SECRET_QUERY_PARAM)
    if provided:
        return provided

    return headers.get(SECRET_HEADER) or None


def verify_webhook_secret(received: Optional[str], expected: Optional[str]) -> bool:
    """Verify a webhook shared secret.

    Args:
        received: The secret supplied by the caller (can be None)
        expected: The configured secret

    Returns:
        True if the secret is valid, False otherwise

    Note:
        Uses constant-time comparison to prevent timing attacks.
    """
    if not expected:
        return False

    if not received:
        return False

    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
