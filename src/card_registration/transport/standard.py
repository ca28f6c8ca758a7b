"""
Standard transport built on httpx.

This is the transport used on every host that supports credentialed
cross-origin requests, and the fallback for same-origin requests on hosts
that need the legacy cross-domain path.

Outcome mapping:
- 2xx status: TransportSuccess with the response text
- any other status: TransportFailure with the response, no structured error
- connection-level failure (no status received): TransportFailure without
  a response, which callers treat like a zero status
- invalid URL, unsupported scheme or local protocol error while building or
  dispatching the request: TransportFailure carrying a 001597/001598 error
- response that cannot be read (bad content encoding, too many redirects):
  TransportFailure carrying a 001599 error
"""

import httpx
import structlog

from card_registration.config import settings
from card_registration.models.errors import (
    TOKEN_PROCESSING_ERROR_MESSAGE,
    RegistrationError,
    ResultCode,
)
from card_registration.transport.base import (
    FORM_CONTENT_TYPE,
    HttpMethod,
    Transport,
    TransportFailure,
    TransportOutcome,
    TransportRequest,
    TransportSuccess,
    construction_failure,
)

logger = structlog.get_logger(__name__)


class StandardTransport(Transport):
    """Transport performing the exchange with an httpx.AsyncClient."""

    name = "standard"

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float | None = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            http_client: Client to send requests with. When omitted the
                transport creates one and closes it in aclose().
            timeout_seconds: Timeout for the created client
                (defaults to settings.request_timeout_seconds)
        """
        if timeout_seconds is None:
            timeout_seconds = settings.request_timeout_seconds
        self.timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout_seconds)

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self.http_client.aclose()

    def build_headers(self, request: TransportRequest) -> dict[str, str]:
        if request.method == HttpMethod.POST:
            return {"Content-Type": FORM_CONTENT_TYPE}
        return {}

    async def send(self, request: TransportRequest) -> TransportOutcome:
        """Send the request and classify the response by status code."""
        try:
            http_request = self.http_client.build_request(
                request.method.value,
                request.target_url(),
                headers=self.build_headers(request),
                content=request.body(),
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
            logger.warning(
                "transport_request_build_failed",
                transport=self.name,
                url=request.url,
                cross_origin=request.cross_origin,
                error=str(e),
            )
            return construction_failure(request, e)

        return await self._dispatch(request, http_request)

    async def _dispatch(
        self,
        request: TransportRequest,
        http_request: httpx.Request,
    ) -> TransportOutcome:
        logger.debug(
            "transport_request_sent",
            transport=self.name,
            method=request.method.value,
            url=request.url,
            cross_origin=request.cross_origin,
        )

        try:
            response = await self.http_client.send(http_request)
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError, httpx.InvalidURL) as e:
            logger.warning(
                "transport_request_rejected",
                transport=self.name,
                url=request.url,
                error=str(e),
            )
            return construction_failure(request, e, http_request)
        except httpx.TransportError as e:
            # No HTTP status was ever received
            logger.warning(
                "transport_connection_failed",
                transport=self.name,
                url=request.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return TransportFailure(response=None)
        except httpx.RequestError as e:
            # Exchange started but the response could not be read
            # (undecodable body, redirect loop)
            logger.warning(
                "transport_response_unreadable",
                transport=self.name,
                url=request.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return TransportFailure(
                error=RegistrationError(
                    result_code=ResultCode.TOKEN_PROCESSING_ERROR.value,
                    result_message=TOKEN_PROCESSING_ERROR_MESSAGE,
                    request=http_request,
                ),
            )

        return self.classify(request, response)

    def classify(self, request: TransportRequest, response: httpx.Response) -> TransportOutcome:
        """Map a completed response to an outcome."""
        if response.is_success:
            return TransportSuccess(body=response.text, response=response)

        logger.warning(
            "transport_response_error",
            transport=self.name,
            status_code=response.status_code,
        )
        return TransportFailure(response=response)
