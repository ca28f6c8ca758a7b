"""Unit tests for the legacy cross-domain transport."""

import httpx
import pytest

from card_registration.transport.base import (
    FORM_CONTENT_TYPE,
    HttpMethod,
    TransportFailure,
    TransportRequest,
    TransportSuccess,
)
from card_registration.transport.legacy import LegacyCrossDomainTransport

TOKEN_URL = "https://tokenization.example.com/getToken"


def make_transport(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LegacyCrossDomainTransport(http_client=client)


def cross_origin_request():
    return TransportRequest(
        method=HttpMethod.POST,
        url=TOKEN_URL,
        cross_origin=True,
        fields={"data": "prereg", "cardCvx": "123"},
    )


@pytest.mark.asyncio
class TestLegacyCrossOrigin:
    """Cross-origin requests take the legacy path."""

    async def test_completed_exchange_is_success(self):
        transport = make_transport(lambda request: httpx.Response(200, text="tok_legacy"))

        outcome = await transport.send(cross_origin_request())

        assert isinstance(outcome, TransportSuccess)
        assert outcome.body == "tok_legacy"

    async def test_error_status_still_reported_as_success(self):
        transport = make_transport(lambda request: httpx.Response(500, text="errorCode=02101"))

        outcome = await transport.send(cross_origin_request())

        assert isinstance(outcome, TransportSuccess)
        assert outcome.body == "errorCode=02101"

    async def test_no_content_type_header(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="ok")

        transport = make_transport(handler)
        await transport.send(cross_origin_request())

        assert "content-type" not in seen[0].headers
        assert seen[0].content == b"data=prereg&cardCvx=123"

    async def test_transport_error_has_no_structured_error(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        transport = make_transport(handler)

        outcome = await transport.send(cross_origin_request())

        assert isinstance(outcome, TransportFailure)
        assert outcome.error is None
        assert outcome.response is None

    async def test_construction_error_is_normalized(self):
        def handler(request):
            raise httpx.LocalProtocolError("denied")

        transport = make_transport(handler)

        outcome = await transport.send(cross_origin_request())

        assert isinstance(outcome, TransportFailure)
        assert outcome.error.result_code == "001598"
        assert outcome.error.result_message == "A cross-origin HTTP request failed: denied"


@pytest.mark.asyncio
class TestLegacySameOrigin:
    """Same-origin requests keep the standard behavior."""

    async def test_error_status_is_failure(self):
        transport = make_transport(lambda request: httpx.Response(500, text="boom"))

        outcome = await transport.send(
            TransportRequest(method=HttpMethod.POST, url=TOKEN_URL, cross_origin=False)
        )

        assert isinstance(outcome, TransportFailure)
        assert outcome.status_code == 500

    async def test_form_content_type_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, text="ok")

        transport = make_transport(handler)
        await transport.send(
            TransportRequest(method=HttpMethod.POST, url=TOKEN_URL, cross_origin=False)
        )

        assert seen[0].headers["content-type"] == FORM_CONTENT_TYPE
