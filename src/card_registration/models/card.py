"""Card input domain models."""

from dataclasses import dataclass
from enum import Enum


class CardType(str, Enum):
    """Card types accepted by the tokenization endpoint."""

    AMEX = "AMEX"
    CB_VISA_MASTERCARD = "CB_VISA_MASTERCARD"
    MAESTRO = "MAESTRO"
    BCMC = "BCMC"


# Card types that skip expiry and CVV checks
UNCHECKED_CARD_TYPES = frozenset({CardType.MAESTRO.value, CardType.BCMC.value})


def card_type_name(card_type: CardType | str | None) -> str:
    """Return the stripped name of a card type given as enum, string or None."""
    if card_type is None:
        return ""
    if isinstance(card_type, CardType):
        return card_type.value
    return str(card_type).strip()


@dataclass(frozen=True, repr=False)
class CardInput:
    """
    Sensitive card details supplied for a single registration call.

    Never persisted and never logged. The repr only exposes the last four
    digits of the card number so an accidental log line does not leak the PAN.

    Attributes:
        number: Card number (PAN), digits only
        card_type: Card type driving the CVV and expiry rules
        expiry: Expiration date in MMYY format
        cvv: Card verification value
    """

    number: str
    card_type: CardType | str
    expiry: str
    cvv: str

    def __repr__(self) -> str:
        last4 = (self.number or "").strip()[-4:]
        return f"CardInput(number='****{last4}', card_type='{card_type_name(self.card_type)}')"

    __str__ = __repr__
