from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..models import HttpEvent
from ..relay import InboundRelay
from .deps import get_inbound_relay

# Create router for webhook endpoints
router = APIRouter(tags=["webhook"])


@router.api_route("/webhook", methods=["GET", "POST"], response_class=PlainTextResponse)
async def webhook(
    request: Request,
    relay: Annotated[InboundRelay, Depends(get_inbound_relay)],
) -> PlainTextResponse:
    """
    WhatsApp webhook endpoint.

    GET answers the hub.challenge subscription handshake, POST receives
    message deliveries. Both are handed to the inbound relay as-is.
    """
    body = await request.body()
    event = HttpEvent(
        http_method=request.method,
        query_string_parameters=dict(request.query_params),
        body=body.decode("utf-8", errors="replace") if body else None,
    )
    response = await relay(event)
    return PlainTextResponse(response.body, status_code=response.status_code)
