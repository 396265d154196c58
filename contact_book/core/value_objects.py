"""Value Objects — PhoneNumber and Address, immutable and self-validating.

Invariants:
    - PhoneNumber.number matches PHONE_NUMBER_PATTERN, length within [5, 20]
    - Address.address_line is non-blank, length within [2, 256]
    - Address.phone_numbers holds no duplicates (structural equality), first occurrence wins
    - Address equality/hash = (address_line, address_type, numbers sorted) — phone order is
      not significant
    - Both are frozen: "changing" a value means constructing a new instance

Design Decisions:
    - Frozen dataclasses validated at construction: construction either yields a valid
      value or raises a DomainRuleViolation, no partially-built instance escapes
    - Phone numbers stored as a tuple; the list accessor hands out a copy
"""

import re
from dataclasses import dataclass
from typing import Iterable

from contact_book.core.domain_constants import (
    MIN_ADDRESS_LENGTH, MAX_ADDRESS_LENGTH,
    MIN_PHONE_NUMBER_LENGTH, MAX_PHONE_NUMBER_LENGTH, PHONE_NUMBER_PATTERN,
)
from contact_book.core.domain_types import AddressType
from contact_book.core.errors import InvalidAddressError, InvalidPhoneNumberError

_PHONE_NUMBER_RE = re.compile(PHONE_NUMBER_PATTERN)


@dataclass(frozen=True)
class PhoneNumber:
    """A single phone number in international `+digits` form."""
    number: str

    def __post_init__(self):
        _validate_phone_number(self.number)

    def __str__(self) -> str:
        return self.number


def _validate_phone_number(number: object) -> None:
    if not isinstance(number, str) or not number.strip():
        raise InvalidPhoneNumberError("Phone number cannot be empty.")
    if not MIN_PHONE_NUMBER_LENGTH <= len(number) <= MAX_PHONE_NUMBER_LENGTH:
        raise InvalidPhoneNumberError(
            f"Phone number must be between {MIN_PHONE_NUMBER_LENGTH} and "
            f"{MAX_PHONE_NUMBER_LENGTH} characters long.",
        )
    if not _PHONE_NUMBER_RE.fullmatch(number):
        raise InvalidPhoneNumberError(
            "Phone number must start with '+' followed by digits only.",
        )


@dataclass(frozen=True, eq=False, init=False, repr=False)
class Address:
    """Address of one type (Home or Business) with its phone numbers."""
    address_line: str
    address_type: AddressType
    _phone_numbers: tuple[PhoneNumber, ...] = ()

    def __init__(
        self,
        address_line: str,
        address_type: AddressType | str,
        phone_numbers: Iterable[PhoneNumber] = (),
    ):
        _validate_address_line(address_line)
        object.__setattr__(self, "address_line", address_line)
        object.__setattr__(self, "address_type", _coerce_address_type(address_type))
        object.__setattr__(self, "_phone_numbers", _dedupe_phone_numbers(phone_numbers))

    @property
    def phone_numbers(self) -> list[PhoneNumber]:
        """Copy of the phone numbers; mutating it leaves the address untouched."""
        return list(self._phone_numbers)

    @property
    def phone_number_values(self) -> list[str]:
        return [p.number for p in self._phone_numbers]

    def _equality_components(self) -> tuple:
        return (
            self.address_line,
            self.address_type,
            tuple(sorted(p.number for p in self._phone_numbers)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._equality_components() == other._equality_components()

    def __hash__(self) -> int:
        return hash(self._equality_components())

    def __repr__(self) -> str:
        return (
            f"Address(address_line={self.address_line!r}, "
            f"address_type={self.address_type.value!r}, "
            f"phone_numbers={self.phone_number_values!r})"
        )


def _validate_address_line(address_line: object) -> None:
    if not isinstance(address_line, str) or not address_line.strip():
        raise InvalidAddressError("Address line cannot be empty.")
    if not MIN_ADDRESS_LENGTH <= len(address_line) <= MAX_ADDRESS_LENGTH:
        raise InvalidAddressError(
            f"Address line must be between {MIN_ADDRESS_LENGTH} and "
            f"{MAX_ADDRESS_LENGTH} characters long.",
        )


def _coerce_address_type(address_type: AddressType | str) -> AddressType:
    try:
        return AddressType(address_type)
    except ValueError:
        raise InvalidAddressError(
            f"Unknown address type {address_type!r}.",
        ) from None


def _dedupe_phone_numbers(
    phone_numbers: Iterable[PhoneNumber] | None,
) -> tuple[PhoneNumber, ...]:
    if phone_numbers is None:
        return ()
    unique: dict[PhoneNumber, None] = {}
    for phone in phone_numbers:
        if not isinstance(phone, PhoneNumber):
            raise InvalidAddressError(
                f"Expected a PhoneNumber, got {type(phone).__name__}.",
            )
        unique.setdefault(phone, None)
    return tuple(unique)
