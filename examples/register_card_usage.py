"""Example usage of CardRegistrationSession.

This example registers cards against the in-process mock transport, so it
runs without a tokenization endpoint. Replace the transport with the one
returned by create_session() to talk to a real endpoint.
"""

import asyncio

from card_registration import (
    CardInput,
    CardType,
    RegistrationContext,
    RegistrationError,
    TokenizationResult,
    create_session,
)
from card_registration.logging_config import configure_logging
from card_registration.transport import MockTransport

INIT_PAYLOAD = {
    "Id": "cardreg_example_123",
    "cardRegistrationURL": "https://tokenization.example.com/webpayment/getToken",
    "preregistrationData": "preregistration-data-from-platform",
    "accessKey": "1X0m87dmM2LiwFgxPLBJ",
}


async def example_successful_registration():
    """Example: Tokenize a valid card."""
    print("\n=== Example 1: Successful Registration ===\n")

    context = RegistrationContext.from_init_payload(INIT_PAYLOAD)
    async with create_session(context=context, transport=MockTransport()) as session:
        outcome = await session.register_card(
            CardInput(
                number="4242424242424242",
                card_type=CardType.CB_VISA_MASTERCARD,
                expiry="1230",
                cvv="123",
            )
        )

    if isinstance(outcome, TokenizationResult):
        print("Token received, send this to the payment platform:")
        print(outcome.to_payload())
    else:
        print(f"Registration failed: {outcome.to_dict()}")


async def example_validation_failure():
    """Example: Card rejected locally, no request sent."""
    print("\n=== Example 2: Validation Failure ===\n")

    transport = MockTransport()
    context = RegistrationContext.from_init_payload(INIT_PAYLOAD)
    session = create_session(context=context, transport=transport)

    def on_failure(error: RegistrationError) -> None:
        print(f"{error.result_code}: {error.result_message}")

    await session.register_card(
        CardInput(number="4242424242424241", card_type="AMEX", expiry="1230", cvv="1234"),
        on_failure=on_failure,
    )
    print(f"Requests sent: {transport.call_count}")


async def example_endpoint_rejection():
    """Example: Tokenization endpoint answers with an error code."""
    print("\n=== Example 3: Endpoint Rejection ===\n")

    context = RegistrationContext.from_init_payload(INIT_PAYLOAD)
    session = create_session(context=context, transport=MockTransport())

    outcome = await session.register_card(
        CardInput(
            number="4000000000000002",
            card_type=CardType.CB_VISA_MASTERCARD,
            expiry="1230",
            cvv="123",
        )
    )
    print(outcome.to_dict() if isinstance(outcome, RegistrationError) else outcome)


async def main():
    configure_logging(log_level="WARNING", format_as_json=False)
    await example_successful_registration()
    await example_validation_failure()
    await example_endpoint_rejection()


if __name__ == "__main__":
    asyncio.run(main())
