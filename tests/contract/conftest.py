"""Contract test configuration."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tg_webhook.factory import create_app

SAMPLE_MESSAGE_UPDATE = {
    "update_id": 123456789,
    "message": {
        "message_id": 1,
        "from": {"id": 1111, "is_bot": False, "first_name": "Test"},
        "chat": {"id": 1111, "type": "private"},
        "date": 1700000000,
        "text": "/start",
    },
}

SAMPLE_CALLBACK_UPDATE = {
    "update_id": 123456790,
    "callback_query": {
        "id": "cb-1",
        "from": {"id": 1111, "is_bot": False, "first_name": "Test"},
        "data": "ack",
    },
}


@pytest_asyncio.fixture
async def async_client(make_settings):
    """Async client over the ASGI app, secret set to s1."""
    app = create_app(make_settings(telegram_webhook_secret="s1"))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
