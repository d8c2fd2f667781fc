import logging
from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI

from .api import messages, status, webhook
from .config import Settings
from .resources import open_resources


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # Create and configure logger
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=settings.log_level,
    )

    async with open_resources(settings) as resources:
        logfire.instrument_sqlalchemy(resources.engine)
        await resources.store.create_table()

        app.state.store = resources.store
        app.state.outbound_relay = resources.outbound_relay
        app.state.inbound_relay = resources.inbound_relay
        yield


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="WhatsApp Relay API", lifespan=lifespan)
    app.state.settings = settings

    logfire.configure(
        token=settings.logfire_token,
        send_to_logfire="if-token-present",
        service_name="wa-relay",
    )
    logfire.instrument_pydantic_ai()
    logfire.instrument_fastapi(app)
    logfire.instrument_httpx()

    app.include_router(webhook.router)
    app.include_router(messages.router)
    app.include_router(status.router)
    return app


def run():
    import uvicorn

    settings = Settings()  # pyright: ignore [reportCallIssue]
    print(f"Running on {settings.host}:{settings.port}")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
