"""Pydantic models for the registration handshake payloads.

These models mirror the JSON shapes exchanged with the external
collaborators: the initialization call that yields the registration context,
and the completion call that receives the tokenization result.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RegistrationContext(BaseModel):
    """Per-registration context returned by the card pre-registration call.

    Immutable for the lifetime of a registration attempt.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="Id", description="Card registration identifier")
    registration_endpoint: str = Field(
        ..., alias="cardRegistrationURL", description="Tokenization endpoint URL"
    )
    preregistration_payload: str = Field(
        ..., alias="preregistrationData", description="Opaque pre-registration data"
    )
    access_key: str = Field(
        ..., alias="accessKey", description="Access key for the tokenization endpoint"
    )

    @classmethod
    def from_init_payload(cls, payload: dict[str, Any]) -> "RegistrationContext":
        """Build a context from the initialization payload.

        Args:
            payload: {Id, cardRegistrationURL, preregistrationData, accessKey}

        Returns:
            RegistrationContext instance
        """
        return cls.model_validate(payload)


class TokenizationResult(BaseModel):
    """Token handed back to the caller to finish card registration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., alias="Id", description="Card registration identifier")
    registration_data: str = Field(
        ..., alias="RegistrationData", description="Token returned by the tokenization endpoint"
    )

    def to_payload(self) -> dict[str, str]:
        """Serialize to the completion payload {Id, RegistrationData}."""
        return self.model_dump(by_alias=True)
