"""Host capability probing."""

from dataclasses import dataclass

from card_registration.config import settings

NATIVE_RUNTIME = "native"
BROWSER_RUNTIME = "browser"


@dataclass(frozen=True)
class HostCapabilities:
    """
    Networking capabilities of the host running the kit.

    Attributes:
        runtime: "native" for app runtimes with unrestricted networking,
            "browser" for hosts subject to cross-origin rules
        credentialed_cross_origin: Standard request object supports
            credentialed cross-origin requests
        legacy_cross_domain: Host exposes the legacy cross-domain primitive
    """

    runtime: str = NATIVE_RUNTIME
    credentialed_cross_origin: bool = True
    legacy_cross_domain: bool = False

    @property
    def is_native(self) -> bool:
        return self.runtime.strip().lower() == NATIVE_RUNTIME

    @classmethod
    def detect(cls) -> "HostCapabilities":
        """Read the host capabilities from settings."""
        return cls(
            runtime=settings.host_runtime,
            credentialed_cross_origin=settings.host_credentialed_cross_origin,
            legacy_cross_domain=settings.host_legacy_cross_domain,
        )


def supports_cross_origin_requests(host: HostCapabilities | None = None) -> bool:
    """Return True if the host can make cross-origin requests."""
    if host is None:
        host = HostCapabilities.detect()
    if host.is_native:
        return True
    if host.credentialed_cross_origin:
        return True
    return host.legacy_cross_domain


def uses_legacy_transport(host: HostCapabilities) -> bool:
    """Return True if cross-origin requests must go through the legacy primitive."""
    return not host.is_native and not host.credentialed_cross_origin and host.legacy_cross_domain
