"""Configuration management for the card registration kit."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SANDBOX_BASE_URL = "https://api.sandbox.mangopay.com"
PRODUCTION_BASE_URL = "https://api.mangopay.com"


class Settings(BaseSettings):
    """Settings loaded from CARD_REGISTRATION_* environment variables."""

    # Payment platform
    base_url: str = Field(
        default=SANDBOX_BASE_URL,
        description="Payment platform API base URL (sandbox by default)",
    )
    client_id: str = Field(default="", description="Client ID used with the payment platform API")

    # Transport
    request_timeout_seconds: float = Field(default=30.0, description="Tokenization request timeout")

    # Host capabilities seen by the capability probe
    host_runtime: str = Field(default="native", description="Host runtime: native or browser")
    host_credentialed_cross_origin: bool = Field(
        default=True, description="Host supports credentialed cross-origin requests"
    )
    host_legacy_cross_domain: bool = Field(
        default=False, description="Host exposes the legacy cross-domain request primitive"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(default=True, description="Render logs as JSON")
    environment: str = Field(default="development", description="Environment name")

    model_config = SettingsConfigDict(
        env_prefix="CARD_REGISTRATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
