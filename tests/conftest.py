"""Test configuration and fixtures for the webhook service tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tg_webhook.core.settings import Settings, get_settings
from tg_webhook.factory import create_app

SETTINGS_ENV_VARS = [
    "SERVICE_NAME",
    "LOG_LEVEL",
    "METRICS_ENABLED",
    "TELEGRAM_WEBHOOK_SECRET",
    "CF_PAGES_URL",
    "PREVIEW_URL",
    "LOG_UPDATES",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment out of settings under test."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Build settings explicitly, ignoring the environment."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    """Default settings: no secret, production deployment."""
    return make_settings()


@pytest.fixture
def app(settings) -> FastAPI:
    """Return a fresh app instance."""
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    """Create a synchronous test client."""
    return TestClient(app)


@pytest.fixture
def make_client(make_settings):
    """Create a test client for an app built from the given settings."""

    def _make(**overrides) -> TestClient:
        return TestClient(create_app(make_settings(**overrides)))

    return _make
