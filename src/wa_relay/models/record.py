from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

# Sender recorded for every message this service sends
LOCAL_SENDER = "me"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds, e.g. 2024-05-01T10:00:00.123Z"""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class SendMessageRequest(BaseModel):
    recipient: str = Field(..., description="Destination WhatsApp id")
    content: str = Field(..., description="Message text")


class SendMessageEvent(BaseModel):
    """Resolver-style invocation envelope: {"arguments": {...}}"""

    arguments: SendMessageRequest


class MessageRecord(BaseModel):
    """A sent message as written to the message store. Never updated."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "0b8f6c1e-3c1a-4d0e-9a57-2f0f3f1f9b1c",
                "sender": "me",
                "recipient": "+15551234567",
                "content": "hello",
                "timestamp": "2024-05-01T10:00:00.123Z",
            }
        },
    )

    id: str
    sender: str
    recipient: str
    content: str
    timestamp: str

    @classmethod
    def outbound(cls, recipient: str, content: str) -> "MessageRecord":
        return cls(
            id=str(uuid4()),
            sender=LOCAL_SENDER,
            recipient=recipient,
            content=content,
            timestamp=utc_timestamp(),
        )
