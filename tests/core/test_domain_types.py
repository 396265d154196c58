"""Domain Types — identity wrapper and address type enum."""

from contact_book.core.domain_constants import (
    MAX_ADDRESS_LENGTH, MAX_FULL_NAME_LENGTH, MAX_ID, MAX_PHONE_NUMBER_LENGTH,
    MIN_ADDRESS_LENGTH, MIN_PHONE_NUMBER_LENGTH,
)
from contact_book.core.domain_types import AddressType, PersonId


def test_person_id_wraps_int():
    assert PersonId(5) == 5


def test_address_type_has_two_slots():
    assert set(AddressType) == {AddressType.HOME, AddressType.BUSINESS}


def test_address_type_serializes_to_string():
    assert AddressType.HOME.value == "Home"
    assert AddressType("Business") is AddressType.BUSINESS
    assert AddressType.HOME == "Home"


def test_limits():
    assert MAX_FULL_NAME_LENGTH == 70
    assert (MIN_ADDRESS_LENGTH, MAX_ADDRESS_LENGTH) == (2, 256)
    assert (MIN_PHONE_NUMBER_LENGTH, MAX_PHONE_NUMBER_LENGTH) == (5, 20)


def test_max_id_fits_an_integer_column():
    assert MAX_ID == 2**31 - 1
