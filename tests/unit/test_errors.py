"""Unit tests for the webhook error taxonomy."""

import json

import pytest

from tg_webhook.core.errors import (
    LoggingFailure,
    MalformedBody,
    MethodNotAllowed,
    Unauthorized,
    WebhookError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "error_class, status_code, body",
    [
        (Unauthorized, 401, {"ok": False, "error": "unauthorized"}),
        (MalformedBody, 400, {"ok": False, "error": "invalid json"}),
    ],
)
def test_json_errors_render(error_class, status_code, body):
    """JSON errors render status, body and content type."""
    response = error_class().to_response()

    assert response.status_code == status_code
    assert json.loads(response.body) == body
    assert response.headers["content-type"] == "application/json; charset=utf-8"


@pytest.mark.unit
def test_method_not_allowed_renders_plain_text():
    """Method gate answers in plain text and advertises POST."""
    response = MethodNotAllowed().to_response()

    assert response.status_code == 405
    assert response.body == b"Method Not Allowed"
    assert response.headers["allow"] == "POST"


@pytest.mark.unit
def test_errors_share_base_class():
    """Every webhook error can be caught as WebhookError."""
    for error_class in (MethodNotAllowed, Unauthorized, MalformedBody, LoggingFailure):
        assert issubclass(error_class, WebhookError)


@pytest.mark.unit
def test_detail_defaults_to_error_message():
    """The exception message falls back to the public error string."""
    assert str(MalformedBody()) == "invalid json"
    assert str(MalformedBody("Expecting value")) == "Expecting value"
