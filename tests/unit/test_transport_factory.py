"""Unit tests for transport factory."""

import httpx
import pytest

from card_registration.capabilities import HostCapabilities
from card_registration.transport import (
    LegacyCrossDomainTransport,
    MockTransport,
    StandardTransport,
    Transport,
    TransportFactory,
    get_transport,
)


class TestTransportFactoryCreation:
    """Tests for creating transport instances."""

    def test_create_standard_transport(self):
        transport = TransportFactory.create_transport("standard", {"timeout_seconds": 12})

        assert type(transport) is StandardTransport
        assert transport.timeout_seconds == 12

    def test_create_legacy_transport(self):
        transport = TransportFactory.create_transport("legacy")

        assert isinstance(transport, LegacyCrossDomainTransport)

    def test_create_mock_transport_with_config(self):
        transport = TransportFactory.create_transport("mock", {"latency_ms": 5})

        assert isinstance(transport, MockTransport)
        assert transport.latency_ms == 5

    def test_create_transport_case_insensitive(self):
        assert type(TransportFactory.create_transport("STANDARD")) is StandardTransport
        assert isinstance(TransportFactory.create_transport("Legacy"), LegacyCrossDomainTransport)

    def test_shared_http_client_is_used(self):
        client = httpx.AsyncClient()

        transport = TransportFactory.create_transport("standard", {"http_client": client})

        assert transport.http_client is client

    def test_create_unknown_transport_raises_error(self):
        with pytest.raises(ValueError) as exc_info:
            TransportFactory.create_transport("carrier_pigeon")

        assert "Unknown transport: carrier_pigeon" in str(exc_info.value)
        assert "Available transports:" in str(exc_info.value)


class TestTransportFactoryRegistry:
    """Tests for transport registration."""

    def test_list_transports(self):
        transports = TransportFactory.list_transports()

        assert {"standard", "legacy", "mock"} <= set(transports)
        assert transports == sorted(transports)

    def test_register_new_transport(self):
        class CustomTransport(Transport):
            name = "custom"

            async def send(self, request):
                pass

        TransportFactory.register_transport("custom", CustomTransport)
        try:
            assert "custom" in TransportFactory.list_transports()
            transport = TransportFactory.create_transport("custom")
            assert isinstance(transport, CustomTransport)
        finally:
            TransportFactory._TRANSPORTS.pop("custom")

    def test_register_invalid_transport_raises_error(self):
        class NotATransport:
            pass

        with pytest.raises(TypeError) as exc_info:
            TransportFactory.register_transport("invalid", NotATransport)

        assert "must inherit from Transport" in str(exc_info.value)


class TestTransportSelection:
    """Tests for capability-based strategy selection."""

    def test_native_host_uses_standard(self):
        assert TransportFactory.select_transport_name(HostCapabilities()) == "standard"

    def test_browser_host_uses_standard(self, browser_host):
        assert TransportFactory.select_transport_name(browser_host) == "standard"

    def test_legacy_host_uses_legacy(self, legacy_host):
        assert TransportFactory.select_transport_name(legacy_host) == "legacy"

    def test_get_transport_for_legacy_host(self, legacy_host):
        transport = get_transport(host=legacy_host, timeout_seconds=3)

        assert isinstance(transport, LegacyCrossDomainTransport)
        assert transport.timeout_seconds == 3

    def test_get_transport_default_host(self):
        transport = get_transport()

        assert type(transport) is StandardTransport
