from unittest.mock import AsyncMock

import pytest

from wa_relay.config import Settings
from wa_relay.whatsapp import MessageSendResponse


@pytest.fixture
def settings() -> Settings:
    """Get test settings."""
    return Settings(
        phone_number_id="1234567890",
        access_token="test_access_token",
        verify_token="SECRET",
        db_uri="sqlite+aiosqlite://",
        openai_api_key="test_key",
        appsync_api_url="https://example.appsync-api.us-east-1.amazonaws.com/graphql",
        appsync_api_key="test_api_key",
    )


@pytest.fixture
def mock_whatsapp():
    client = AsyncMock()
    client.send_text = AsyncMock(
        return_value=MessageSendResponse.model_validate(
            {"messaging_product": "whatsapp", "messages": [{"id": "wamid.OUT"}]}
        )
    )
    return client


@pytest.fixture
def mock_store():
    store = AsyncMock()
    store.put = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_completion():
    client = AsyncMock()
    client.reply = AsyncMock(return_value="¡Hola! ¿En qué puedo ayudarte?")
    return client


@pytest.fixture
def mock_graphql():
    client = AsyncMock()
    client.receive_message = AsyncMock(return_value={"data": {"receiveMessage": {}}})
    return client


def make_delivery(message: dict | None = None, wa_id: str = "15557654321") -> dict:
    value = {
        "messaging_product": "whatsapp",
        "metadata": {"display_phone_number": "15550001111", "phone_number_id": "1234567890"},
        "contacts": [{"profile": {"name": "Ana"}, "wa_id": wa_id}],
    }
    if message is not None:
        value["messages"] = [message]
    return {
        "object": "whatsapp_business_account",
        "entry": [{"id": "WABA_ID", "changes": [{"field": "messages", "value": value}]}],
    }


@pytest.fixture
def delivery_factory():
    return make_delivery


@pytest.fixture
def text_delivery() -> dict:
    return make_delivery(
        {
            "from": "15557654321",
            "id": "wamid.IN",
            "timestamp": "1714557600",
            "type": "text",
            "text": {"body": "Hola, ¿qué tal?"},
        }
    )


@pytest.fixture
def image_delivery() -> dict:
    return make_delivery(
        {
            "from": "15557654321",
            "id": "wamid.IMG",
            "timestamp": "1714557600",
            "type": "image",
            "image": {"id": "MEDIA_ID", "mime_type": "image/jpeg"},
        }
    )
