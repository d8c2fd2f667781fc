import hmac
import logging
from typing import Any, Dict

from pydantic import ValidationError

from ..completion import CompletionClient
from ..errors import CompletionError
from ..graphql import GraphQLClient
from ..models import (
    HttpEvent,
    HttpResponse,
    MalformedPayload,
    ParsedDelivery,
    parse_delivery,
)

logger = logging.getLogger(__name__)

APOLOGY = (
    "Lo siento, ocurrió un error procesando tu mensaje. "
    "Intenta nuevamente más tarde."
)


class InboundRelay:
    """
    Handle WhatsApp webhook calls.

    GET requests answer the subscription handshake. POST requests carrying a
    text message get an automated reply which is forwarded through the
    receiveMessage GraphQL mutation.
    """

    def __init__(
        self,
        verify_token: str,
        completion: CompletionClient,
        graphql: GraphQLClient,
    ):
        self.verify_token = verify_token
        self.completion = completion
        self.graphql = graphql

    async def __call__(self, event: HttpEvent | Dict[str, Any]) -> HttpResponse:
        if not isinstance(event, HttpEvent):
            try:
                event = HttpEvent.model_validate(event)
            except ValidationError as exc:
                logger.warning(f"Unrecognized webhook event: {exc.error_count()} validation error(s)")
                return HttpResponse.bad_request()

        params = event.query_string_parameters
        if event.http_method == "GET" and params.get("hub.mode") == "subscribe":
            return self.verify(params)

        if event.http_method == "POST" and event.has_body:
            return await self.deliver(event.body)

        return HttpResponse.bad_request()

    def verify(self, params: Dict[str, str]) -> HttpResponse:
        token = params.get("hub.verify_token")
        if token is not None and hmac.compare_digest(
            token.encode(), self.verify_token.encode()
        ):
            logger.info("Webhook subscription verified")
            return HttpResponse.challenge(params.get("hub.challenge") or "")

        logger.warning("Webhook verification failed: token mismatch")
        return HttpResponse.verification_failed()

    async def deliver(self, body: Any) -> HttpResponse:
        try:
            delivery = parse_delivery(body)
            if isinstance(delivery, MalformedPayload):
                raise delivery.error()
            await self.relay_reply(delivery)
        except Exception:
            # Every failure after the body is read maps to the same fixed 500
            logger.exception("Failed to process webhook delivery")
            return HttpResponse.error()

        return HttpResponse.ok()

    async def relay_reply(self, delivery: ParsedDelivery) -> None:
        message = delivery.text_message
        if message is None:
            kind = delivery.message.type if delivery.message else None
            logger.debug(f"No text message from {delivery.sender} (type: {kind})")
            return

        try:
            reply = await self.completion.reply(message.body)
        except CompletionError:
            reply = APOLOGY

        await self.graphql.receive_message(
            sender=delivery.sender, content=reply, message_id=message.id
        )
        logger.info(f"Forwarded reply to {delivery.sender} for message {message.id}")
