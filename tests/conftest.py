"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- A registration context as returned by the pre-registration call
- Valid card input for each card type
- A recording transport double with scripted outcomes
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src and the project root to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from card_registration.capabilities import HostCapabilities
from card_registration.models import CardInput, CardType, RegistrationContext
from tests.fakes import TOKENIZATION_URL, RecordingTransport


@pytest.fixture
def reference_date():
    """Fixed reference date for expiry validation."""
    return date(2024, 1, 1)


@pytest.fixture
def init_payload():
    """Initialization payload as returned by the pre-registration call."""
    return {
        "Id": "cardreg_12345",
        "cardRegistrationURL": TOKENIZATION_URL,
        "preregistrationData": "prereg-data-abc",
        "accessKey": "access-key-xyz",
    }


@pytest.fixture
def registration_context(init_payload):
    """Registration context built from the initialization payload."""
    return RegistrationContext.from_init_payload(init_payload)


@pytest.fixture
def visa_card():
    """Valid CB_VISA_MASTERCARD card expiring after the reference date."""
    return CardInput(
        number="4242424242424242",
        card_type=CardType.CB_VISA_MASTERCARD,
        expiry="1225",
        cvv="123",
    )


@pytest.fixture
def amex_card():
    """Valid AMEX card with a 4-digit CVV."""
    return CardInput(
        number="378282246310005",
        card_type=CardType.AMEX,
        expiry="0624",
        cvv="1234",
    )


@pytest.fixture
def browser_host():
    """Browser host with credentialed cross-origin support."""
    return HostCapabilities(runtime="browser", credentialed_cross_origin=True)


@pytest.fixture
def legacy_host():
    """Browser host limited to the legacy cross-domain primitive."""
    return HostCapabilities(
        runtime="browser",
        credentialed_cross_origin=False,
        legacy_cross_domain=True,
    )


@pytest.fixture
def unsupported_host():
    """Browser host with no way to make cross-origin requests."""
    return HostCapabilities(
        runtime="browser",
        credentialed_cross_origin=False,
        legacy_cross_domain=False,
    )


@pytest.fixture
def recording_transport():
    """Recording transport answering with a token by default."""
    return RecordingTransport()
