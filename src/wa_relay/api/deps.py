from fastapi import Request

from ..relay import InboundRelay, OutboundRelay
from ..store import MessageStore


def get_store(request: Request) -> MessageStore:
    assert request.app.state.store, "Message store not initialized"
    return request.app.state.store


def get_outbound_relay(request: Request) -> OutboundRelay:
    assert request.app.state.outbound_relay, "Outbound relay not initialized"
    return request.app.state.outbound_relay


def get_inbound_relay(request: Request) -> InboundRelay:
    assert request.app.state.inbound_relay, "Inbound relay not initialized"
    return request.app.state.inbound_relay
