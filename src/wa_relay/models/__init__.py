from .http_event import HttpEvent, HttpResponse
from .record import (
    LOCAL_SENDER,
    MessageRecord,
    SendMessageEvent,
    SendMessageRequest,
)
from .webhook import (
    InboundMessage,
    MalformedPayload,
    ParsedDelivery,
    TextMessage,
    parse_delivery,
)

__all__ = [
    "HttpEvent",
    "HttpResponse",
    "LOCAL_SENDER",
    "MessageRecord",
    "SendMessageEvent",
    "SendMessageRequest",
    "InboundMessage",
    "MalformedPayload",
    "ParsedDelivery",
    "TextMessage",
    "parse_delivery",
]
