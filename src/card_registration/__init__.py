"""Card registration kit: local card validation and tokenization handshake."""

from card_registration.capabilities import HostCapabilities, supports_cross_origin_requests
from card_registration.models import (
    CardInput,
    CardRegistrationError,
    CardType,
    RegistrationContext,
    RegistrationError,
    ResultCode,
    SessionNotInitialized,
    TokenizationResult,
)
from card_registration.session import CardRegistrationSession, SessionState, create_session
from card_registration.validators import (
    Invalid,
    Valid,
    validate_card_input,
    validate_card_number,
    validate_cvv,
    validate_expiry,
)

__all__ = [
    "CardInput",
    "CardRegistrationError",
    "CardRegistrationSession",
    "CardType",
    "HostCapabilities",
    "Invalid",
    "RegistrationContext",
    "RegistrationError",
    "ResultCode",
    "SessionNotInitialized",
    "SessionState",
    "TokenizationResult",
    "Valid",
    "create_session",
    "supports_cross_origin_requests",
    "validate_card_input",
    "validate_card_number",
    "validate_cvv",
    "validate_expiry",
]
