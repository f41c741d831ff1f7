"""Luhn checksum and card network detection."""

import pytest

from bhojpur_subscription import CardNetwork, CardNumberError, card_network, is_luhn_valid


CARDS = [
    ("4242424242424242", CardNetwork.VISA, True),
    ("4213729238347292", CardNetwork.VISA, False),
    ("79927398713", CardNetwork.UNKNOWN, True),
    ("79927398710", CardNetwork.UNKNOWN, False),
    ("601134239348202", CardNetwork.DISCOVER, False),
    ("344347386473833", CardNetwork.AMERICAN_EXPRESS, False),
    ("374347386473833", CardNetwork.AMERICAN_EXPRESS, False),
    ("361134239348202", CardNetwork.DINERS_CLUB, False),
    ("300134239348202", CardNetwork.DINERS_CLUB, False),
    ("521134239348202", CardNetwork.MASTERCARD, False),
    ("380134239348202", CardNetwork.JCB, False),
    ("180034239348202", CardNetwork.JCB, False),
]


@pytest.mark.parametrize("number,network,valid", CARDS)
def test_fixture_cards(number, network, valid):
    assert is_luhn_valid(number) is valid
    assert card_network(number) is network


@pytest.mark.parametrize("number", [
    "4012888888881881",
    "5555555555554444",
    "5105105105105100",
    "378282246310005",
    "6011000990139424",
    "30569309025904",
    "3530111333300000",
])
def test_real_test_cards_pass_checksum(number):
    assert is_luhn_valid(number)


def test_checksum_is_deterministic():
    assert all(is_luhn_valid("79927398713") for _ in range(5))
    assert not any(is_luhn_valid("79927398710") for _ in range(5))


def test_single_zero_is_valid_and_single_digit_otherwise_not():
    assert is_luhn_valid("0")
    assert not is_luhn_valid("5")


@pytest.mark.parametrize("bad", ["4242 4242 4242 4242", "4242-4242", "abc", "١٢٣", "+4242", ""])
def test_non_digit_input_is_rejected(bad):
    with pytest.raises(CardNumberError):
        is_luhn_valid(bad)


def test_card_number_error_is_value_error():
    with pytest.raises(ValueError):
        is_luhn_valid("12x4")


@pytest.mark.parametrize("number,network", [
    ("6011000990139424", CardNetwork.DISCOVER),
    ("2131000000000008", CardNetwork.JCB),
    ("5100000000000008", CardNetwork.MASTERCARD),
    ("5500000000000004", CardNetwork.MASTERCARD),
    ("5600000000000003", CardNetwork.UNKNOWN),
    ("3530111333300000", CardNetwork.RUPAY),
    ("30569309025904", CardNetwork.DINERS_CLUB),
    ("30669309025904", CardNetwork.UNKNOWN),
    ("38520000023237", CardNetwork.JCB),
    ("6200000000000005", CardNetwork.UNKNOWN),
    ("0000000000000000", CardNetwork.UNKNOWN),
    ("9999", CardNetwork.UNKNOWN),
])
def test_network_prefixes(number, network):
    assert card_network(number) is network


@pytest.mark.parametrize("short,network", [
    ("", CardNetwork.UNKNOWN),
    ("4", CardNetwork.VISA),
    ("3", CardNetwork.UNKNOWN),
    ("30", CardNetwork.UNKNOWN),
    ("34", CardNetwork.AMERICAN_EXPRESS),
    ("39", CardNetwork.JCB),
    ("5", CardNetwork.UNKNOWN),
    ("6", CardNetwork.UNKNOWN),
    ("601", CardNetwork.UNKNOWN),
    ("1", CardNetwork.UNKNOWN),
    ("213", CardNetwork.UNKNOWN),
])
def test_short_inputs_never_fault(short, network):
    assert card_network(short) is network


def test_network_values_match_api_names():
    assert CardNetwork.AMERICAN_EXPRESS.value == "American Express"
    assert CardNetwork("Diners Club") is CardNetwork.DINERS_CLUB
