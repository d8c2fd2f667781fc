import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from ..errors import UpstreamError
from ..models import MessageRecord, SendMessageEvent, SendMessageRequest
from ..relay import OutboundRelay
from .deps import get_outbound_relay

logger = logging.getLogger(__name__)

router = APIRouter(tags=["messages"])


async def _send(relay: OutboundRelay, request: SendMessageRequest) -> MessageRecord:
    try:
        return await relay(request)
    except UpstreamError as e:
        logger.error(f"Send to {request.recipient} failed at {e.service}: {e}")
        raise HTTPException(status_code=502, detail="send failed") from e


@router.post("/messages", response_model=MessageRecord)
async def send_message(
    request: SendMessageRequest,
    relay: Annotated[OutboundRelay, Depends(get_outbound_relay)],
) -> MessageRecord:
    """Send a WhatsApp text message and return the stored record"""
    return await _send(relay, request)


@router.post("/send", response_model=MessageRecord)
async def send_message_event(
    event: SendMessageEvent,
    relay: Annotated[OutboundRelay, Depends(get_outbound_relay)],
) -> MessageRecord:
    """Same as POST /messages, for callers using the {"arguments": {...}} envelope"""
    return await _send(relay, event.arguments)
