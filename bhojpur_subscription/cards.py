from __future__ import annotations
from enum import Enum

from .errors import CardNumberError

_DIGITS = frozenset("0123456789")


class CardNetwork(str, Enum):
    """Card networks, valued with the names the API reports in `card.type`."""
    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    MASTERCARD = "MasterCard"
    RUPAY = "RuPay"
    VISA = "Visa"
    UNKNOWN = "Unknown"


def _require_digits(number: str) -> None:
    if not isinstance(number, str) or not number:
        raise CardNumberError("card number must be a non-empty string of digits")
    for ch in number:
        if ch not in _DIGITS:
            raise CardNumberError(f"invalid character {ch!r} in card number")


def is_luhn_valid(number: str) -> bool:
    """
    Luhn (mod 10) checksum of a card number, to flag typos before submitting.

    Digits are read from the right; every second digit starting with the
    second-to-last is doubled (a two-digit product counts as product - 9).
    The number passes when the total is divisible by 10.

    Raises CardNumberError for anything other than ASCII digits.
    """
    _require_digits(number)
    total = 0
    double = False
    for ch in reversed(number):
        d = ord(ch) - 48
        if double:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double = not double
    return total % 10 == 0


def card_network(number: str) -> CardNetwork:
    """
    Guess the card network from the leading digits.

    No checksum or length validation is done here. Inputs shorter than a
    prefix simply don't match it; anything unrecognised is UNKNOWN.
    """
    if not number:
        return CardNetwork.UNKNOWN

    first = number[0]
    if first == "4":
        return CardNetwork.VISA
    if first in ("1", "2"):
        if number[:4] in ("2131", "1800"):
            return CardNetwork.JCB
        return CardNetwork.UNKNOWN
    if first == "6":
        if number[:4] == "6011":
            return CardNetwork.DISCOVER
        return CardNetwork.UNKNOWN
    if first == "5":
        if number[:2] in ("51", "52", "53", "54", "55"):
            return CardNetwork.MASTERCARD
        return CardNetwork.UNKNOWN
    if first == "3":
        two = number[:2]
        if len(two) < 2:
            return CardNetwork.UNKNOWN
        if two in ("34", "37"):
            return CardNetwork.AMERICAN_EXPRESS
        if two == "35":
            return CardNetwork.RUPAY
        if two == "36":
            return CardNetwork.DINERS_CLUB
        if two == "30":
            # 306-309 are not a recognised range
            if number[:3] in ("300", "301", "302", "303", "304", "305"):
                return CardNetwork.DINERS_CLUB
            return CardNetwork.UNKNOWN
        return CardNetwork.JCB
    return CardNetwork.UNKNOWN


__all__ = ["CardNetwork", "is_luhn_valid", "card_network"]
