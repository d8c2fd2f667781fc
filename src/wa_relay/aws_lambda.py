"""
AWS Lambda entry points.

send_message_handler is invoked as a resolver with {"arguments": {...}};
webhook_handler receives API Gateway proxy events from the WhatsApp webhook.
Each invocation runs on its own event loop, so clients and the database
engine are opened and closed per invocation. Settings are read once.
"""

import asyncio
import logging
from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .resources import open_resources

logger = logging.getLogger(__name__)


@lru_cache()
def get_settings() -> Settings:
    settings = Settings()  # pyright: ignore [reportCallIssue]
    logging.getLogger().setLevel(settings.log_level)
    return settings


async def _send_message(event: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    async with open_resources(settings, pooled=False) as resources:
        return await resources.outbound_relay.handle_event(event)


async def _webhook(event: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    async with open_resources(settings, pooled=False) as resources:
        response = await resources.inbound_relay(event)
        return response.to_lambda()


def send_message_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    # Failures propagate so the invocation is reported as failed
    return asyncio.run(_send_message(event, get_settings()))


def webhook_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    return asyncio.run(_webhook(event, get_settings()))
