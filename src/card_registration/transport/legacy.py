"""
Legacy cross-domain transport.

Some hosts cannot make credentialed cross-origin requests with their
standard request object but expose an older cross-domain primitive. That
primitive cannot set request headers and does not report the HTTP status,
so this transport:

- sends the form body without a Content-Type header
- reports every completed exchange as a success with the response text
- reports transport-level errors without a structured error, leaving the
  caller to synthesize one

Same-origin requests are unaffected and go through the standard path.
"""

import httpx
import structlog

from card_registration.transport.base import (
    TransportOutcome,
    TransportRequest,
    TransportSuccess,
)
from card_registration.transport.standard import StandardTransport

logger = structlog.get_logger(__name__)


class LegacyCrossDomainTransport(StandardTransport):
    """Transport for hosts limited to the legacy cross-domain primitive."""

    name = "legacy"

    def build_headers(self, request: TransportRequest) -> dict[str, str]:
        if request.cross_origin:
            return {}
        return super().build_headers(request)

    def classify(self, request: TransportRequest, response: httpx.Response) -> TransportOutcome:
        if not request.cross_origin:
            return super().classify(request, response)

        logger.debug(
            "legacy_transport_completed",
            status_code=response.status_code,
        )
        return TransportSuccess(body=response.text, response=response)
