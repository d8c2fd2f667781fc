import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..http_client import BaseHTTPClient
from .models import MessageSendResponse, SendTextRequest, TextBody

logger = logging.getLogger(__name__)

GRAPH_API_URL = "https://graph.facebook.com/v20.0"


class WhatsAppClient(BaseHTTPClient):
    def __init__(
        self,
        phone_number_id: str,
        access_token: str,
        base_url: str = GRAPH_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize WhatsApp Cloud API client

        Args:
            phone_number_id: Business phone number the messages are sent from
            access_token: Bearer token of the business account
            base_url: Versioned Graph API URL
            timeout: Request timeout in seconds
        """
        if not phone_number_id:
            raise ValueError("phone_number_id is required")
        self.phone_number_id = phone_number_id
        super().__init__(
            base_url,
            service="whatsapp",
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=timeout,
            transport=transport,
        )

    async def send_message(self, request: SendTextRequest) -> MessageSendResponse:
        response = await self._post(f"/{self.phone_number_id}/messages", json=request)
        try:
            return MessageSendResponse.model_validate_json(response.content)
        except ValidationError:
            logger.warning(
                f"Unexpected WhatsApp send response ({response.status_code}): {response.text[:200]}"
            )
            return MessageSendResponse()

    async def send_text(self, to: str, body: str) -> MessageSendResponse:
        """Send a plain text message to a WhatsApp user"""
        return await self.send_message(SendTextRequest(to=to, text=TextBody(body=body)))
