from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class TextBody(BaseModel):
    body: str
    preview_url: Optional[bool] = None


class SendTextRequest(BaseModel):
    """Payload of POST /{phone_number_id}/messages for a text message"""

    messaging_product: Literal["whatsapp"] = "whatsapp"
    to: str
    type: Literal["text"] = "text"
    text: TextBody


class SentContact(BaseModel):
    input: Optional[str] = None
    wa_id: Optional[str] = None


class SentMessage(BaseModel):
    id: Optional[str] = None
    message_status: Optional[str] = None


class MessageSendResponse(BaseModel):
    # Every field is optional: the relay records the send whatever comes back
    model_config = ConfigDict(extra="allow")

    messaging_product: Optional[str] = None
    contacts: Optional[List[SentContact]] = None
    messages: Optional[List[SentMessage]] = None

    @property
    def message_id(self) -> Optional[str]:
        if self.messages:
            return self.messages[0].id
        return None
