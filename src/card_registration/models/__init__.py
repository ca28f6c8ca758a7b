"""Domain models for card registration."""

from card_registration.models.card import CardInput, CardType
from card_registration.models.errors import (
    CardRegistrationError,
    RegistrationError,
    ResultCode,
    SessionNotInitialized,
)
from card_registration.models.registration import RegistrationContext, TokenizationResult

__all__ = [
    "CardInput",
    "CardType",
    "CardRegistrationError",
    "RegistrationContext",
    "RegistrationError",
    "ResultCode",
    "SessionNotInitialized",
    "TokenizationResult",
]
