import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import MalformedPayloadError

logger = logging.getLogger(__name__)


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# Only the first entry, change and message of a delivery are read, so list
# items are validated one at a time instead of all together.


class WebhookEnvelope(_Lenient):
    """Top level of a WhatsApp Cloud API webhook delivery"""

    object: Optional[str] = None
    entry: List[Any] = Field(..., min_length=1)


class WebhookEntry(_Lenient):
    """One WhatsApp Business Account entry"""

    id: Optional[str] = None
    changes: List[Any] = Field(..., min_length=1)


class Contact(_Lenient):
    wa_id: str
    profile: Optional[dict] = None


class ChangeValue(_Lenient):
    messaging_product: Optional[str] = None
    metadata: Optional[dict] = None
    contacts: List[Any] = Field(..., min_length=1)
    messages: Optional[List[Any]] = None


class WebhookChange(_Lenient):
    field: Optional[str] = None
    value: ChangeValue


class TextContent(_Lenient):
    body: str


class InboundMessage(_Lenient):
    """A message object as delivered by the webhook, of any type"""

    id: Optional[str] = None
    type: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    timestamp: Optional[str] = None
    text: Optional[TextContent] = None


class TextMessage(BaseModel):
    id: str
    body: str


class ParsedDelivery(BaseModel):
    """A webhook delivery reduced to what the inbound relay acts on"""

    sender: str
    message: Optional[InboundMessage] = None
    text_message: Optional[TextMessage] = None


class MalformedPayload(BaseModel):
    reason: str

    def error(self) -> MalformedPayloadError:
        return MalformedPayloadError(self.reason)


def _warn_ignored(kind: str, items: List[Any]) -> None:
    if len(items) > 1:
        logger.warning(f"Delivery carries {len(items)} {kind}, ignoring all but the first")


def parse_delivery(body: Any) -> ParsedDelivery | MalformedPayload:
    """
    Parse a webhook body into a ParsedDelivery.

    The body may be the raw JSON text or an already decoded mapping. Anything
    that cannot be followed down to the sender's wa_id is a MalformedPayload;
    a delivery without messages is not.
    """
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except ValueError as exc:
            return MalformedPayload(reason=f"invalid JSON: {exc}")

    try:
        envelope = WebhookEnvelope.model_validate(body)
        _warn_ignored("entries", envelope.entry)

        entry = WebhookEntry.model_validate(envelope.entry[0])
        _warn_ignored("changes", entry.changes)

        value = WebhookChange.model_validate(entry.changes[0]).value
        sender = Contact.model_validate(value.contacts[0]).wa_id

        message = None
        text_message = None
        if value.messages:
            _warn_ignored("messages", value.messages)
            message = InboundMessage.model_validate(value.messages[0])

        if message is not None and message.type == "text":
            if message.id is None or message.text is None:
                return MalformedPayload(reason="text message without id or body")
            text_message = TextMessage(id=message.id, body=message.text.body)
    except ValidationError as exc:
        return MalformedPayload(
            reason=f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}"
        )

    return ParsedDelivery(sender=sender, message=message, text_message=text_message)
