"""Base interface and value types for transports."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote

import httpx

from card_registration.models.errors import RegistrationError, ResultCode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


class HttpMethod(str, Enum):
    """HTTP methods supported by transports."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class TransportRequest:
    """
    A single HTTP exchange to perform.

    Attributes:
        method: GET or POST
        url: Target URL
        cross_origin: Request targets another origin than the host's own
        fields: Parameters sent as query string (GET) or form body (POST)
    """

    method: HttpMethod
    url: str
    cross_origin: bool = False
    fields: Mapping[str, str | None] = field(default_factory=dict)

    def encode_parameters(self) -> str:
        """Build the key=value&... parameter string, percent-encoding values."""
        return "&".join(
            f"{key}={quote('' if value is None else str(value), safe=_URI_COMPONENT_SAFE)}"
            for key, value in self.fields.items()
        )

    def target_url(self) -> str:
        """URL to hit, with parameters appended for GET requests."""
        if self.method != HttpMethod.GET:
            return self.url
        separator = "&" if "?" in self.url else "?"
        return f"{self.url}{separator}{self.encode_parameters()}"

    def body(self) -> str | None:
        """Request body: the parameter string for POST, nothing for GET."""
        if self.method == HttpMethod.POST:
            return self.encode_parameters()
        return None


@dataclass(frozen=True)
class TransportSuccess:
    """The exchange completed and produced a response body."""

    body: str | None
    response: httpx.Response | None = None


@dataclass(frozen=True)
class TransportFailure:
    """
    The exchange failed.

    ``error`` is only set when the failure happened while building or
    dispatching the request. Otherwise the caller decides how to report the
    failure from ``response`` (None when no HTTP status was ever received).
    """

    response: httpx.Response | None = None
    error: RegistrationError | None = None

    @property
    def status_code(self) -> int:
        return self.response.status_code if self.response is not None else 0


TransportOutcome = TransportSuccess | TransportFailure


def construction_failure(
    request: TransportRequest,
    exc: Exception,
    http_request: httpx.Request | None = None,
) -> TransportFailure:
    """
    Normalize an exception raised while building or sending a request.

    The built httpx.Request, when there is one, is attached to the error as
    its raw handle; no response exists at this point.
    """
    if request.cross_origin:
        code = ResultCode.CROSS_ORIGIN_REQUEST_FAILED
        message = "A cross-origin HTTP request failed"
    else:
        code = ResultCode.REQUEST_FAILED
        message = "An HTTP request failed"

    detail = str(exc)
    if detail:
        message = f"{message}: {detail}"

    return TransportFailure(
        error=RegistrationError(
            result_code=code.value,
            result_message=message,
            request=http_request,
        ),
    )


class Transport(ABC):
    """
    Abstract base class for transport strategies.

    Every strategy performs exactly one underlying network call per send()
    and resolves to exactly one outcome. Exceptions never escape send().
    """

    name: str = "base"

    @abstractmethod
    async def send(self, request: TransportRequest) -> TransportOutcome:
        """
        Perform the HTTP exchange described by ``request``.

        Args:
            request: Method, URL, origin flag and fields to send

        Returns:
            TransportSuccess or TransportFailure
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the transport."""
        return None
