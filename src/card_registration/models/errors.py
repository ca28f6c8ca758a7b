"""Result codes and error types for card registration."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx


class ResultCode(str, Enum):
    """Result codes reported to the caller's failure path."""

    CROSS_ORIGIN_NOT_SUPPORTED = "009999"
    CARD_NUMBER_INVALID = "105202"
    EXPIRY_DATE_INVALID = "105203"
    CVV_INVALID = "105204"
    REQUEST_BLOCKED = "001596"
    REQUEST_FAILED = "001597"
    CROSS_ORIGIN_REQUEST_FAILED = "001598"
    TOKEN_PROCESSING_ERROR = "001599"


TOKEN_PROCESSING_ERROR_MESSAGE = "Token processing error"


@dataclass(frozen=True)
class RegistrationError:
    """
    Failure outcome of a card registration attempt.

    Every failure kind (capability, validation, transport, protocol) is
    reported as one of these values rather than raised. ``result_code`` is a
    plain string because protocol errors carry whatever code the
    tokenization endpoint returned.

    Attributes:
        result_code: Numeric result code (e.g. "105202")
        result_message: Human readable message
        response: Raw HTTP response when one exists
        request: Raw HTTP request when the failure happened before any
            response was received
    """

    result_code: str
    result_message: str
    response: httpx.Response | None = None
    request: httpx.Request | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the error object shape handed to integrators."""
        payload: dict[str, Any] = {
            "ResultCode": self.result_code,
            "ResultMessage": self.result_message,
        }
        if self.response is not None:
            payload["Response"] = self.response
        if self.request is not None:
            payload["Request"] = self.request
        return payload


class CardRegistrationError(Exception):
    """Base exception for card registration misuse."""

    pass


class SessionNotInitialized(CardRegistrationError):
    """
    Raised when register_card() is called before init().

    This signals a programming error in the integration, not a registration
    outcome, so it is raised instead of being reported as a RegistrationError.
    """

    pass
