"""Pre-flight validation of card data.

All validators are pure functions: they never raise and never touch the
network, and the same input always yields the same outcome. Each returns
either ``VALID`` or an ``Invalid`` carrying the result code and message that
the registration session forwards to the caller.
"""

import re
from dataclasses import dataclass
from datetime import date

from card_registration.models.card import (
    UNCHECKED_CARD_TYPES,
    CardInput,
    CardType,
    card_type_name,
)
from card_registration.models.errors import RegistrationError, ResultCode

_DIGITS_ONLY = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Valid:
    """Successful validation outcome."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation outcome."""

    code: str
    message: str

    def __bool__(self) -> bool:
        return False

    def to_error(self) -> RegistrationError:
        return RegistrationError(result_code=self.code, result_message=self.message)


ValidationOutcome = Valid | Invalid

VALID = Valid()

CARD_NUMBER_FORMAT_ERROR = Invalid(ResultCode.CARD_NUMBER_INVALID.value, "CARD_NUMBER_FORMAT_ERROR")
EXPIRY_DATE_FORMAT_ERROR = Invalid(ResultCode.EXPIRY_DATE_INVALID.value, "EXPIRY_DATE_FORMAT_ERROR")
PAST_EXPIRY_DATE_ERROR = Invalid(ResultCode.EXPIRY_DATE_INVALID.value, "PAST_EXPIRY_DATE_ERROR")
CVV_FORMAT_ERROR = Invalid(ResultCode.CVV_INVALID.value, "CVV_FORMAT_ERROR")


def _is_numeric(value: str) -> bool:
    return _DIGITS_ONLY.fullmatch(value) is not None


def luhn_checksum_valid(digits: str) -> bool:
    """
    Check the Luhn (mod 10) checksum of a digit string.

    Scans right to left, doubling every second digit starting from the
    second-from-rightmost and subtracting 9 from doubled values above 9.
    """
    total = 0
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def validate_card_number(number: str | None) -> ValidationOutcome:
    """
    Validate card number format and check digit.

    Args:
        number: Card number, surrounding whitespace ignored

    Returns:
        VALID, or CARD_NUMBER_FORMAT_ERROR if the number is not all digits
        or fails the Luhn checksum
    """
    number = number.strip() if number else ""
    if not _is_numeric(number) or not luhn_checksum_valid(number):
        return CARD_NUMBER_FORMAT_ERROR
    return VALID


def validate_expiry(
    expiry: str | None,
    reference_date: date,
    card_type: CardType | str | None = None,
) -> ValidationOutcome:
    """
    Validate an MMYY expiration date against a reference date.

    Args:
        expiry: Expiration date as two-digit month and two-digit year
        reference_date: Date the card must not have expired before
        card_type: Card type; MAESTRO and BCMC cards are not checked

    Returns:
        VALID, EXPIRY_DATE_FORMAT_ERROR or PAST_EXPIRY_DATE_ERROR
    """
    if card_type_name(card_type) in UNCHECKED_CARD_TYPES:
        return VALID

    expiry = expiry.strip() if expiry else ""
    if len(expiry) != 4 or not _is_numeric(expiry):
        return EXPIRY_DATE_FORMAT_ERROR

    month = int(expiry[:2])
    year = int(expiry[2:]) + 2000
    if not 1 <= month <= 12:
        return EXPIRY_DATE_FORMAT_ERROR

    if year > reference_date.year:
        return VALID
    if year == reference_date.year and month >= reference_date.month:
        return VALID

    return PAST_EXPIRY_DATE_ERROR


def validate_cvv(cvv: str | None, card_type: CardType | str | None) -> ValidationOutcome:
    """
    Validate a CVV against the length rule of its card type.

    AMEX accepts 3 or 4 digits, CB_VISA_MASTERCARD exactly 3. MAESTRO and
    BCMC cards are not checked. Any other card type is rejected.
    """
    type_name = card_type_name(card_type)
    if type_name in UNCHECKED_CARD_TYPES:
        return VALID

    cvv = cvv.strip() if cvv else ""
    if _is_numeric(cvv):
        if type_name == CardType.AMEX.value and len(cvv) in (3, 4):
            return VALID
        if type_name == CardType.CB_VISA_MASTERCARD.value and len(cvv) == 3:
            return VALID

    return CVV_FORMAT_ERROR


def validate_card_input(card: CardInput, reference_date: date) -> ValidationOutcome:
    """
    Validate card number, then expiry, then CVV.

    Returns the first failure; later fields are not checked once one fails.
    """
    outcome = validate_card_number(card.number)
    if not outcome:
        return outcome

    outcome = validate_expiry(card.expiry, reference_date, card.card_type)
    if not outcome:
        return outcome

    return validate_cvv(card.cvv, card.card_type)
