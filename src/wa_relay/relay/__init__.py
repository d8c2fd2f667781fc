from .inbound import APOLOGY, InboundRelay
from .outbound import OutboundRelay

__all__ = ["APOLOGY", "InboundRelay", "OutboundRelay"]
