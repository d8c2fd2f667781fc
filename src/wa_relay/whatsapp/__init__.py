from .client import WhatsAppClient
from .models import MessageSendResponse, SendTextRequest, TextBody

__all__ = [
    "WhatsAppClient",
    "MessageSendResponse",
    "SendTextRequest",
    "TextBody",
]
