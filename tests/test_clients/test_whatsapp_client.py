import json

import httpx
import pytest

from wa_relay.errors import UpstreamError
from wa_relay.whatsapp import WhatsAppClient


def make_client(handler) -> WhatsAppClient:
    return WhatsAppClient(
        "1234567890",
        "test_access_token",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_send_text_payload():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={
                "messaging_product": "whatsapp",
                "contacts": [{"input": "+15551234567", "wa_id": "15551234567"}],
                "messages": [{"id": "wamid.OUT"}],
            },
        )

    async with make_client(handler) as client:
        response = await client.send_text("+15551234567", "hello")

    assert response.message_id == "wamid.OUT"
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://graph.facebook.com/v20.0/1234567890/messages"
    assert request.headers["Authorization"] == "Bearer test_access_token"
    assert json.loads(request.content) == {
        "messaging_product": "whatsapp",
        "to": "+15551234567",
        "type": "text",
        "text": {"body": "hello"},
    }


@pytest.mark.asyncio
async def test_unexpected_response_body_is_tolerated():
    async with make_client(lambda request: httpx.Response(200, text="OK")) as client:
        response = await client.send_text("+15551234567", "hello")

    assert response.message_id is None


@pytest.mark.asyncio
async def test_error_status_raises_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Invalid OAuth access token"}})

    async with make_client(handler) as client:
        with pytest.raises(UpstreamError) as exc_info:
            await client.send_text("+15551234567", "hello")

    assert exc_info.value.service == "whatsapp"
    assert "Invalid OAuth access token" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_transport_error_raises_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(UpstreamError):
            await client.send_text("+15551234567", "hello")


def test_invalid_base_url():
    with pytest.raises(ValueError):
        WhatsAppClient("1234567890", "token", base_url="not-a-url")
