"""
Transport strategies for the tokenization exchange.

- base.Transport: Abstract interface all strategies implement
- standard.StandardTransport: httpx transport, status-code based outcomes
- legacy.LegacyCrossDomainTransport: Header-less cross-domain path
- mock_transport.MockTransport: In-process tokenization endpoint for testing
- factory: Capability-based strategy selection
"""

from card_registration.transport.base import (
    HttpMethod,
    Transport,
    TransportFailure,
    TransportOutcome,
    TransportRequest,
    TransportSuccess,
)
from card_registration.transport.factory import TransportFactory, get_transport
from card_registration.transport.legacy import LegacyCrossDomainTransport
from card_registration.transport.mock_transport import MockTransport
from card_registration.transport.standard import StandardTransport

__all__ = [
    "HttpMethod",
    "Transport",
    "TransportFailure",
    "TransportOutcome",
    "TransportRequest",
    "TransportSuccess",
    "TransportFactory",
    "get_transport",
    "LegacyCrossDomainTransport",
    "MockTransport",
    "StandardTransport",
]
