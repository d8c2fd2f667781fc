"""
Failures a relay knows how to map to a response.

``CompletionError`` is the only recoverable kind: the inbound relay replaces
the generated reply with a fixed apology. Every other ``RelayError`` aborts
the invocation.
"""


class RelayError(Exception):
    """Base class for relay failures"""


class MalformedPayloadError(RelayError):
    """The webhook body could not be navigated to a sender"""


class UpstreamError(RelayError):
    """A downstream call (HTTP API or message store) failed"""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")


class CompletionError(UpstreamError):
    """The completion API could not produce a reply"""

    def __init__(self, message: str):
        super().__init__("completion", message)
