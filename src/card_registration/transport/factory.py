"""
Transport factory for creating transport strategies.

The strategy is chosen once from the host capabilities and injected into
the registration session, so tests can swap in a fake without touching the
session code.
"""

from typing import Any

import httpx
import structlog

from card_registration.capabilities import HostCapabilities, uses_legacy_transport
from card_registration.config import settings
from card_registration.transport.base import Transport
from card_registration.transport.legacy import LegacyCrossDomainTransport
from card_registration.transport.mock_transport import MockTransport
from card_registration.transport.standard import StandardTransport

logger = structlog.get_logger(__name__)


class TransportFactory:
    """Factory for creating transport instances by name."""

    # Registry of available transports
    _TRANSPORTS: dict[str, type[Transport]] = {
        "standard": StandardTransport,
        "legacy": LegacyCrossDomainTransport,
        "mock": MockTransport,
    }

    @classmethod
    def create_transport(
        cls,
        transport_name: str,
        transport_config: dict[str, Any] | None = None,
    ) -> Transport:
        """
        Create a transport instance by name.

        Args:
            transport_name: Name of the transport ("standard", "legacy", "mock")
            transport_config: Optional transport-specific configuration. The
                httpx transports accept "http_client" and "timeout_seconds".

        Returns:
            Transport instance

        Raises:
            ValueError: If transport_name is not registered
        """
        transport_name_lower = transport_name.lower()

        if transport_name_lower not in cls._TRANSPORTS:
            available = ", ".join(cls._TRANSPORTS.keys())
            raise ValueError(
                f"Unknown transport: {transport_name}. "
                f"Available transports: {available}"
            )

        transport_class = cls._TRANSPORTS[transport_name_lower]
        transport_config = dict(transport_config or {})

        logger.info(
            "transport_created",
            transport_name=transport_name_lower,
            transport_class=transport_class.__name__,
        )

        if issubclass(transport_class, StandardTransport):
            return transport_class(
                http_client=transport_config.get("http_client"),
                timeout_seconds=transport_config.get(
                    "timeout_seconds", settings.request_timeout_seconds
                ),
            )
        elif issubclass(transport_class, MockTransport):
            return transport_class(config=transport_config)
        else:
            return transport_class(**transport_config)

    @classmethod
    def select_transport_name(cls, host: HostCapabilities) -> str:
        """Pick the transport strategy matching the host capabilities."""
        return "legacy" if uses_legacy_transport(host) else "standard"

    @classmethod
    def register_transport(cls, name: str, transport_class: type[Transport]) -> None:
        """
        Register a new transport type.

        Args:
            name: Name to register the transport under
            transport_class: Transport subclass to register
        """
        if not issubclass(transport_class, Transport):
            raise TypeError(f"{transport_class.__name__} must inherit from Transport")

        cls._TRANSPORTS[name.lower()] = transport_class
        logger.info(
            "transport_registered",
            transport_name=name.lower(),
            transport_class=transport_class.__name__,
        )

    @classmethod
    def list_transports(cls) -> list[str]:
        """Get sorted list of available transport names."""
        return sorted(cls._TRANSPORTS.keys())


def get_transport(
    host: HostCapabilities | None = None,
    http_client: httpx.AsyncClient | None = None,
    timeout_seconds: float | None = None,
) -> Transport:
    """
    Create the transport strategy for a host.

    Args:
        host: Host capabilities (detected from settings when omitted)
        http_client: Optional shared httpx client
        timeout_seconds: Request timeout (defaults to settings)

    Returns:
        StandardTransport or LegacyCrossDomainTransport
    """
    if host is None:
        host = HostCapabilities.detect()

    transport_config: dict[str, Any] = {"http_client": http_client}
    if timeout_seconds is not None:
        transport_config["timeout_seconds"] = timeout_seconds

    return TransportFactory.create_transport(
        TransportFactory.select_transport_name(host),
        transport_config,
    )
