from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from .completion import CompletionClient
from .config import Settings
from .graphql import GraphQLClient
from .relay import InboundRelay, OutboundRelay
from .store import MessageStore
from .whatsapp import WhatsAppClient


@dataclass
class Resources:
    engine: AsyncEngine
    store: MessageStore
    outbound_relay: OutboundRelay
    inbound_relay: InboundRelay


def create_engine(settings: Settings, pooled: bool = True) -> AsyncEngine:
    if not pooled:
        return create_async_engine(settings.db_uri, poolclass=NullPool)
    return create_async_engine(
        settings.db_uri,
        pool_pre_ping=True,
        pool_recycle=600,
    )


@asynccontextmanager
async def open_resources(
    settings: Settings, pooled: bool = True
) -> AsyncIterator[Resources]:
    """
    Build both relays and everything they talk to from one Settings object.
    Clients and the engine are closed on exit.
    """
    engine = create_engine(settings, pooled)
    store = MessageStore(engine, settings.message_table)

    async with (
        WhatsAppClient(
            settings.phone_number_id,
            settings.access_token,
            base_url=settings.whatsapp_api_url,
            timeout=settings.http_timeout,
        ) as whatsapp,
        GraphQLClient(
            settings.appsync_api_url,
            settings.appsync_api_key,
            timeout=settings.http_timeout,
        ) as graphql,
    ):
        completion = CompletionClient(
            settings.openai_api_key, model_name=settings.completion_model
        )
        try:
            yield Resources(
                engine=engine,
                store=store,
                outbound_relay=OutboundRelay(whatsapp, store),
                inbound_relay=InboundRelay(settings.verify_token, completion, graphql),
            )
        finally:
            await engine.dispose()
