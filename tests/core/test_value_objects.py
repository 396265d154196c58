"""Value Objects — PhoneNumber and Address validation, immutability and equality.

Invariants:
    - PhoneNumber accepts ^\\+\\d+$ with length 5..20 inclusive
    - Address line must be non-blank, 2..256 chars
    - Address equality ignores phone number order and duplicates
    - Accessors hand out copies
"""

import dataclasses

import pytest

from contact_book.core.domain_types import AddressType
from contact_book.core.errors import InvalidAddressError, InvalidPhoneNumberError
from contact_book.core.value_objects import Address, PhoneNumber


# --- PhoneNumber ---------------------------------------------------------------

@pytest.mark.parametrize("number", ["+1234", "+1234567890", "+35312345678", "+" + "9" * 19])
def test_phone_number_accepts_valid_numbers(number):
    assert PhoneNumber(number).number == number


@pytest.mark.parametrize("number", ["", "   ", None])
def test_phone_number_rejects_empty(number):
    with pytest.raises(InvalidPhoneNumberError, match="cannot be empty"):
        PhoneNumber(number)


@pytest.mark.parametrize("number", ["+1", "+123", "+" + "9" * 20])
def test_phone_number_rejects_out_of_range_length(number):
    with pytest.raises(InvalidPhoneNumberError, match="between 5 and 20"):
        PhoneNumber(number)


@pytest.mark.parametrize("number", ["1234567890", "+12-345", "+1234a", "++12345"])
def test_phone_number_rejects_bad_format(number):
    with pytest.raises(InvalidPhoneNumberError, match=r"start with '\+'"):
        PhoneNumber(number)


def test_phone_number_is_immutable():
    phone = PhoneNumber("+12345")
    with pytest.raises(dataclasses.FrozenInstanceError):
        phone.number = "+99999"


def test_phone_number_structural_equality():
    assert PhoneNumber("+12345") == PhoneNumber("+12345")
    assert hash(PhoneNumber("+12345")) == hash(PhoneNumber("+12345"))
    assert str(PhoneNumber("+12345")) == "+12345"


def test_phone_number_error_is_business_rule():
    with pytest.raises(InvalidPhoneNumberError) as exc_info:
        PhoneNumber("nope")
    assert exc_info.value.code == "INVALID_PHONE_NUMBER"
    assert exc_info.value.http_status == 400


# --- Address -------------------------------------------------------------------

def test_address_keeps_its_values():
    address = Address("1 Main St", AddressType.HOME, [PhoneNumber("+12345")])
    assert address.address_line == "1 Main St"
    assert address.address_type is AddressType.HOME
    assert address.phone_number_values == ["+12345"]


def test_address_coerces_string_type():
    assert Address("1 Main St", "Business").address_type is AddressType.BUSINESS


def test_address_rejects_unknown_type():
    with pytest.raises(InvalidAddressError, match="Unknown address type"):
        Address("1 Main St", "Holiday")


@pytest.mark.parametrize("line", ["", "   ", None])
def test_address_rejects_blank_line(line):
    with pytest.raises(InvalidAddressError, match="cannot be empty"):
        Address(line, AddressType.HOME)


@pytest.mark.parametrize("line", ["x", "x" * 257])
def test_address_rejects_out_of_range_line(line):
    with pytest.raises(InvalidAddressError, match="between 2 and 256"):
        Address(line, AddressType.HOME)


def test_address_accepts_boundary_lengths():
    assert Address("xy", AddressType.HOME).address_line == "xy"
    assert len(Address("x" * 256, AddressType.HOME).address_line) == 256


def test_address_rejects_non_phone_number_items():
    with pytest.raises(InvalidAddressError, match="Expected a PhoneNumber"):
        Address("1 Main St", AddressType.HOME, ["+12345"])


def test_address_removes_duplicate_phone_numbers():
    address = Address(
        "1 Main St", AddressType.HOME,
        [PhoneNumber("+12345"), PhoneNumber("+67890"), PhoneNumber("+12345")],
    )
    assert address.phone_number_values == ["+12345", "+67890"]


def test_address_phone_numbers_returns_copy():
    address = Address("1 Main St", AddressType.HOME, [PhoneNumber("+12345")])
    numbers = address.phone_numbers
    numbers.append(PhoneNumber("+67890"))
    assert address.phone_number_values == ["+12345"]


def test_address_equality_ignores_phone_order():
    a = Address("1 Main St", AddressType.HOME, [PhoneNumber("+11111"), PhoneNumber("+22222")])
    b = Address("1 Main St", AddressType.HOME, [PhoneNumber("+22222"), PhoneNumber("+11111")])
    assert a == b
    assert hash(a) == hash(b)


def test_address_inequality_on_any_component():
    base = Address("1 Main St", AddressType.HOME, [PhoneNumber("+11111")])
    assert base != Address("2 Main St", AddressType.HOME, [PhoneNumber("+11111")])
    assert base != Address("1 Main St", AddressType.BUSINESS, [PhoneNumber("+11111")])
    assert base != Address("1 Main St", AddressType.HOME, [PhoneNumber("+22222")])
    assert base != "1 Main St"


def test_address_is_immutable():
    address = Address("1 Main St", AddressType.HOME)
    with pytest.raises(dataclasses.FrozenInstanceError):
        address.address_line = "elsewhere"
