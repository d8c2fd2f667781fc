import logging
from typing import Any, Dict

from ..models import MessageRecord, SendMessageEvent, SendMessageRequest
from ..store import MessageStore
from ..whatsapp import WhatsAppClient

logger = logging.getLogger(__name__)


class OutboundRelay:
    """Send a text message over WhatsApp, then record it in the message store."""

    def __init__(self, whatsapp: WhatsAppClient, store: MessageStore):
        self.whatsapp = whatsapp
        self.store = store

    async def __call__(self, request: SendMessageRequest) -> MessageRecord:
        # A failed send raises here, so nothing is recorded for it
        resp = await self.whatsapp.send_text(request.recipient, request.content)
        logger.info(
            f"Sent message to {request.recipient} (whatsapp id: {resp.message_id})"
        )

        record = MessageRecord.outbound(request.recipient, request.content)
        await self.store.put(record)
        logger.info(f"Recorded message {record.id}")
        return record

    async def handle_event(
        self, event: Dict[str, Any] | SendMessageEvent
    ) -> Dict[str, Any]:
        """Entry point for {"arguments": {"recipient": ..., "content": ...}} invocations"""
        if not isinstance(event, SendMessageEvent):
            event = SendMessageEvent.model_validate(event)
        record = await self(event.arguments)
        return record.model_dump()
