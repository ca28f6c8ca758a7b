"""Unit tests for host capability probing."""

from unittest.mock import patch

from card_registration.capabilities import (
    HostCapabilities,
    supports_cross_origin_requests,
    uses_legacy_transport,
)


class TestSupportsCrossOriginRequests:
    """Tests for the cross-origin capability probe."""

    def test_native_runtime_always_supported(self):
        host = HostCapabilities(
            runtime="native",
            credentialed_cross_origin=False,
            legacy_cross_domain=False,
        )

        assert supports_cross_origin_requests(host) is True

    def test_native_runtime_case_insensitive(self):
        host = HostCapabilities(runtime=" Native ", credentialed_cross_origin=False)

        assert supports_cross_origin_requests(host) is True

    def test_browser_with_credentialed_cross_origin(self, browser_host):
        assert supports_cross_origin_requests(browser_host) is True

    def test_browser_with_legacy_primitive_only(self, legacy_host):
        assert supports_cross_origin_requests(legacy_host) is True

    def test_browser_without_any_support(self, unsupported_host):
        assert supports_cross_origin_requests(unsupported_host) is False

    def test_detects_host_from_settings_when_omitted(self):
        with patch("card_registration.capabilities.settings") as mock_settings:
            mock_settings.host_runtime = "browser"
            mock_settings.host_credentialed_cross_origin = False
            mock_settings.host_legacy_cross_domain = False

            assert supports_cross_origin_requests() is False

    def test_default_host_is_native(self):
        assert HostCapabilities().is_native is True


class TestUsesLegacyTransport:
    """Tests for legacy transport selection."""

    def test_legacy_host(self, legacy_host):
        assert uses_legacy_transport(legacy_host) is True

    def test_browser_host_with_credentialed_support(self, browser_host):
        assert uses_legacy_transport(browser_host) is False

    def test_native_host(self):
        host = HostCapabilities(
            runtime="native",
            credentialed_cross_origin=False,
            legacy_cross_domain=True,
        )

        assert uses_legacy_transport(host) is False

    def test_unsupported_host(self, unsupported_host):
        assert uses_legacy_transport(unsupported_host) is False
