"""
Mock transport for end-to-end testing.

Simulates the tokenization endpoint in-process without making network
calls. Responses follow the endpoint's wire contract: a token string on
success, ``errorCode=<code>`` when the endpoint rejects the card, and HTTP
or connection failures for the transport-level scenarios.

Behaviors are looked up by the ``cardNumber`` field of the request. All
numbers in TEST_CARD_BEHAVIORS pass the Luhn checksum so they reach the
transport through a registration session.
"""

import asyncio
import uuid
from typing import Any

import httpx
import structlog

from card_registration.transport.base import (
    Transport,
    TransportFailure,
    TransportOutcome,
    TransportRequest,
    TransportSuccess,
)

logger = structlog.get_logger(__name__)

TEST_CARD_BEHAVIORS: dict[str, dict[str, Any]] = {
    # Success scenarios
    "4242424242424242": {"type": "success", "description": "Visa/Mastercard token"},
    "5555555555554444": {"type": "success", "description": "Mastercard token"},
    "378282246310005": {"type": "success", "description": "American Express token"},
    # Endpoint rejections (errorCode=<code> body with HTTP 200)
    "4000000000000002": {
        "type": "error_code",
        "code": "02625",
        "description": "Invalid card number",
    },
    "4000000000000069": {
        "type": "error_code",
        "code": "02626",
        "description": "Invalid expiration date",
    },
    "4000000000000127": {
        "type": "error_code",
        "code": "02627",
        "description": "Invalid CVV",
    },
    # Empty body with HTTP 200
    "4000000000000341": {"type": "empty", "description": "Empty token response"},
    # Transport-level scenarios
    "4000000000000119": {
        "type": "http_error",
        "status_code": 500,
        "description": "Endpoint unavailable",
    },
    "4000000000009987": {
        "type": "blocked",
        "description": "Request blocked before reaching the endpoint",
    },
}


class MockTransport(Transport):
    """
    Mock transport answering from TEST_CARD_BEHAVIORS.

    Args:
        config: Configuration dictionary with optional keys:
            - default_response: Behavior for unknown cards ("success" or "error_code")
            - latency_ms: Simulated latency in milliseconds
            - card_behaviors: Override default card behaviors with custom mapping
    """

    name = "mock"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        default_response: str = "success",
        latency_ms: int = 0,
    ) -> None:
        self.config = config or {}
        self.default_response = self.config.get("default_response", default_response)
        self.latency_ms = self.config.get("latency_ms", latency_ms)
        self.card_behaviors = self.config.get("card_behaviors", TEST_CARD_BEHAVIORS)

        # Only counts and URLs are kept; request fields carry card data
        self.call_count = 0
        self.requested_urls: list[str] = []

        logger.info(
            "mock_transport_initialized",
            default_response=self.default_response,
            latency_ms=self.latency_ms,
            custom_behaviors=self.card_behaviors is not TEST_CARD_BEHAVIORS,
        )

    async def send(self, request: TransportRequest) -> TransportOutcome:
        """Answer the request from the card behavior table."""
        self.call_count += 1
        self.requested_urls.append(request.url)

        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

        card_number = (request.fields.get("cardNumber") or "").strip()
        behavior = self.card_behaviors.get(card_number)
        if behavior is None:
            behavior = {"type": self.default_response, "code": "09101"}

        behavior_type = behavior["type"]
        logger.info(
            "mock_transport_request",
            url=request.url,
            behavior=behavior_type,
            description=behavior.get("description"),
        )

        if behavior_type == "blocked":
            return TransportFailure(response=None)

        if behavior_type == "http_error":
            response = self._response(request, behavior.get("status_code", 500), "")
            return TransportFailure(response=response)

        if behavior_type == "error_code":
            body = f"errorCode={behavior['code']}"
        elif behavior_type == "empty":
            body = ""
        else:
            body = behavior.get("token", f"mock_{uuid.uuid4().hex}")

        return TransportSuccess(body=body, response=self._response(request, 200, body))

    def _response(self, request: TransportRequest, status_code: int, body: str) -> httpx.Response:
        return httpx.Response(
            status_code,
            text=body,
            request=httpx.Request(request.method.value, request.url),
        )
