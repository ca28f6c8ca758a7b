"""
Card registration session - tokenization handshake orchestration.

A session ties together the capability probe, the validators and the
transport to exchange card details for a registration token:

1. init() stores the context returned by the card pre-registration call
2. register_card() checks the host can make cross-origin requests
3. the card details are validated locally (no network on failure)
4. the card details are posted to the tokenization endpoint
5. the endpoint's answer is turned into a TokenizationResult, which the
   caller forwards to the payment platform to finish the registration

Session states:
    IDLE -> IN_FLIGHT -> COMPLETED | FAILED

Every failure is returned (and passed to the failure callback) as a
RegistrationError; none is raised out of register_card().
"""

import inspect
from collections.abc import Awaitable, Callable
from datetime import date
from enum import Enum
from typing import Any

import httpx
import structlog

from card_registration.capabilities import HostCapabilities, supports_cross_origin_requests
from card_registration.config import settings
from card_registration.models.card import CardInput
from card_registration.models.errors import (
    TOKEN_PROCESSING_ERROR_MESSAGE,
    RegistrationError,
    ResultCode,
    SessionNotInitialized,
)
from card_registration.models.registration import RegistrationContext, TokenizationResult
from card_registration.transport.base import (
    HttpMethod,
    Transport,
    TransportFailure,
    TransportRequest,
    TransportSuccess,
)
from card_registration.transport.factory import get_transport
from card_registration.validators import validate_card_input

logger = structlog.get_logger(__name__)

ERROR_CODE_PREFIX = "errorCode="

RegistrationOutcome = TokenizationResult | RegistrationError
SuccessCallback = Callable[[TokenizationResult], Awaitable[None] | None]
FailureCallback = Callable[[RegistrationError], Awaitable[None] | None]


class SessionState(str, Enum):
    """Registration session lifecycle states."""

    IDLE = "IDLE"
    IN_FLIGHT = "IN_FLIGHT"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class CardRegistrationSession:
    """
    Session for registering one card against a tokenization endpoint.

    Concurrent register_card() calls on one session are not coordinated:
    each issues its own request and resolves independently, and ``state``
    reflects whichever finished last.
    """

    def __init__(
        self,
        transport: Transport,
        host: HostCapabilities | None = None,
        today: Callable[[], date] = date.today,
        base_url: str | None = None,
        client_id: str | None = None,
        owns_transport: bool = False,
    ) -> None:
        """
        Initialize the session.

        Args:
            transport: Transport strategy used for the tokenization call
            host: Host capabilities for the cross-origin gate
                (detected from settings on each call when omitted)
            today: Returns the reference date for expiry validation
            base_url: Payment platform base URL (defaults to settings.base_url).
                Not used by the handshake; exposed for the caller's
                completion call to the payment platform
            client_id: Payment platform client ID (defaults to settings.client_id),
                exposed for the same completion call
            owns_transport: Close the transport in aclose()
        """
        self.transport = transport
        self.host = host
        self.today = today
        self.base_url = base_url if base_url is not None else settings.base_url
        self.client_id = client_id if client_id is not None else settings.client_id
        self._owns_transport = owns_transport
        self._context: RegistrationContext | None = None
        self.state = SessionState.IDLE

    @property
    def context(self) -> RegistrationContext | None:
        return self._context

    def init(self, context: RegistrationContext) -> None:
        """Store the registration context. No validation, no network."""
        self._context = context
        self.state = SessionState.IDLE

    async def register_card(
        self,
        card: CardInput,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> RegistrationOutcome:
        """
        Validate and tokenize a card.

        Args:
            card: Sensitive card details, used for this call only
            on_success: Optional callback receiving the TokenizationResult
            on_failure: Optional callback receiving the RegistrationError

        Returns:
            TokenizationResult to forward to the payment platform, or the
            RegistrationError describing why registration failed. Exactly
            one of the callbacks is invoked with the same value.

        Raises:
            SessionNotInitialized: If init() was not called first
        """
        context = self._context
        if context is None:
            raise SessionNotInitialized("init() must be called before register_card()")

        self.state = SessionState.IN_FLIGHT
        log = logger.bind(registration_id=context.id)

        outcome = await self._register(context, card, log)

        if isinstance(outcome, TokenizationResult):
            self.state = SessionState.COMPLETED
            log.info("card_registration_tokenized")
            await _invoke(on_success, outcome)
        else:
            self.state = SessionState.FAILED
            log.warning(
                "card_registration_failed",
                result_code=outcome.result_code,
                result_message=outcome.result_message,
            )
            await _invoke(on_failure, outcome)

        return outcome

    async def _register(
        self,
        context: RegistrationContext,
        card: CardInput,
        log: Any,
    ) -> RegistrationOutcome:
        if not supports_cross_origin_requests(self.host):
            return RegistrationError(
                result_code=ResultCode.CROSS_ORIGIN_NOT_SUPPORTED.value,
                result_message="Browser does not support making cross-origin Ajax calls",
            )

        validation = validate_card_input(card, self.today())
        if not validation:
            log.info("card_validation_failed", result_code=validation.code)
            return validation.to_error()

        request = TransportRequest(
            method=HttpMethod.POST,
            url=context.registration_endpoint,
            cross_origin=True,
            fields={
                "data": context.preregistration_payload,
                "accessKeyRef": context.access_key,
                "cardNumber": card.number,
                "cardExpirationDate": card.expiry,
                "cardCvx": card.cvv,
            },
        )

        log.info(
            "tokenization_request",
            endpoint=context.registration_endpoint,
            transport=self.transport.name,
        )
        try:
            transport_outcome = await self.transport.send(request)
        except Exception as e:
            # Transport broke its contract; report rather than raise
            log.error(
                "tokenization_transport_error",
                transport=self.transport.name,
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            return RegistrationError(
                result_code=ResultCode.TOKEN_PROCESSING_ERROR.value,
                result_message=TOKEN_PROCESSING_ERROR_MESSAGE,
            )

        if isinstance(transport_outcome, TransportSuccess):
            return self._handle_token_response(context, transport_outcome)
        return self._handle_transport_failure(transport_outcome)

    def _handle_token_response(
        self,
        context: RegistrationContext,
        outcome: TransportSuccess,
    ) -> RegistrationOutcome:
        body = outcome.body
        if not body:
            return RegistrationError(
                result_code=ResultCode.TOKEN_PROCESSING_ERROR.value,
                result_message=TOKEN_PROCESSING_ERROR_MESSAGE,
                response=outcome.response,
            )

        if body.startswith(ERROR_CODE_PREFIX):
            return RegistrationError(
                result_code=body[len(ERROR_CODE_PREFIX):],
                result_message=TOKEN_PROCESSING_ERROR_MESSAGE,
                response=outcome.response,
            )

        return TokenizationResult(id=context.id, registration_data=body)

    def _handle_transport_failure(self, outcome: TransportFailure) -> RegistrationError:
        if outcome.error is not None:
            return outcome.error

        if outcome.status_code == 0:
            return RegistrationError(
                result_code=ResultCode.REQUEST_BLOCKED.value,
                result_message=(
                    "An HTTP request was blocked by the User's computer "
                    "(probably due to an antivirus)"
                ),
                response=outcome.response,
            )

        return RegistrationError(
            result_code=ResultCode.TOKEN_PROCESSING_ERROR.value,
            result_message=TOKEN_PROCESSING_ERROR_MESSAGE,
            response=outcome.response,
        )

    async def aclose(self) -> None:
        """Close the transport if the session created it."""
        if self._owns_transport:
            await self.transport.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()


async def _invoke(callback: Callable[[Any], Any] | None, value: Any) -> None:
    if callback is None:
        return
    result = callback(value)
    if inspect.isawaitable(result):
        await result


def create_session(
    context: RegistrationContext | None = None,
    host: HostCapabilities | None = None,
    transport: Transport | None = None,
    http_client: httpx.AsyncClient | None = None,
    today: Callable[[], date] = date.today,
) -> CardRegistrationSession:
    """
    Create a registration session wired from settings.

    Args:
        context: Registration context to init() the session with
        host: Host capabilities (detected from settings when omitted)
        transport: Transport strategy; chosen from the host when omitted
        http_client: Shared httpx client for a transport built here
        today: Reference date provider for expiry validation

    Returns:
        CardRegistrationSession, initialized when a context was given
    """
    if host is None:
        host = HostCapabilities.detect()

    owns_transport = transport is None
    if transport is None:
        transport = get_transport(host=host, http_client=http_client)

    session = CardRegistrationSession(
        transport=transport,
        host=host,
        today=today,
        owns_transport=owns_transport,
    )
    if context is not None:
        session.init(context)
    return session
