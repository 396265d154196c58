"""Person Aggregate Root — owns exactly one Home and one Business address.

Invariants:
    - full_name is non-blank and at most MAX_FULL_NAME_LENGTH characters
    - Exactly two address slots exist, keyed by AddressType (Home, Business)
    - Construction is atomic: every check runs before any attribute is assigned
    - update_address replaces one slot wholesale; the other slot is never touched
    - A no-op address update (new == current) is rejected, not silently accepted
    - Soft delete only stamps flags; filtering deleted rows is the repository's job
    - Audit hooks (set_creation_details, set_last_modified_details) are called by the
      persistence layer, never by the aggregate itself

Design Decisions:
    - Person(...) is the validated constructor; Person.reconstitute(...) is the trusted
      rehydration path used only by infrastructure/person_repository.py and skips checks
    - Addresses held in a dict keyed by type; the public accessor returns a new list
"""

from datetime import datetime, timezone

from contact_book.core.domain_constants import MAX_FULL_NAME_LENGTH
from contact_book.core.domain_types import AddressType
from contact_book.core.errors import InvalidPersonError
from contact_book.core.value_objects import Address


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Person:
    """Contact entry with identity, audit and soft-delete metadata."""

    id: int | None
    full_name: str
    created: datetime | None
    created_by: str | None
    last_modified: datetime | None
    last_modified_by: str | None
    is_deleted: bool
    deleted: datetime | None
    deleted_by: str | None

    def __init__(
        self,
        full_name: str,
        home_address: Address | None,
        business_address: Address | None,
    ):
        _validate_full_name(full_name)
        _validate_slot(home_address, AddressType.HOME)
        _validate_slot(business_address, AddressType.BUSINESS)

        self._init_metadata()
        self.full_name = full_name
        self._addresses = {
            AddressType.HOME: home_address,
            AddressType.BUSINESS: business_address,
        }

    @classmethod
    def reconstitute(
        cls,
        id: int,
        full_name: str,
        addresses: list[Address],
        *,
        created: datetime | None = None,
        created_by: str | None = None,
        last_modified: datetime | None = None,
        last_modified_by: str | None = None,
        is_deleted: bool = False,
        deleted: datetime | None = None,
        deleted_by: str | None = None,
    ) -> "Person":
        """Rebuild a Person from stored data. Trusted input only — no invariant checks."""
        person = cls.__new__(cls)
        person._init_metadata()
        person.id = id
        person.full_name = full_name
        person._addresses = {a.address_type: a for a in addresses}
        person.created = created
        person.created_by = created_by
        person.last_modified = last_modified
        person.last_modified_by = last_modified_by
        person.is_deleted = is_deleted
        person.deleted = deleted
        person.deleted_by = deleted_by
        return person

    def _init_metadata(self) -> None:
        self.id = None
        self.created = None
        self.created_by = None
        self.last_modified = None
        self.last_modified_by = None
        self.is_deleted = False
        self.deleted = None
        self.deleted_by = None

    # ─── Read accessors ──────────────────────────────────────────

    @property
    def addresses(self) -> list[Address]:
        return list(self._addresses.values())

    @property
    def home_address(self) -> Address | None:
        return self._addresses.get(AddressType.HOME)

    @property
    def business_address(self) -> Address | None:
        return self._addresses.get(AddressType.BUSINESS)

    def address_of(self, address_type: AddressType) -> Address | None:
        return self._addresses.get(address_type)

    # ─── Mutations ───────────────────────────────────────────────

    def update_full_name(self, full_name: str) -> None:
        _validate_full_name(full_name)
        self.full_name = full_name

    def update_address(
        self, address_type: AddressType | str, new_address: Address | None,
    ) -> None:
        """Replace the address in the given slot.

        Rejects a missing address, an unknown slot, a type mismatch between the
        slot and the new address, and an update that changes nothing.
        """
        if new_address is None:
            raise InvalidPersonError("Address cannot be empty.")
        try:
            slot = AddressType(address_type)
        except ValueError:
            raise InvalidPersonError(
                f"Unknown address type {address_type!r}.",
            ) from None
        current = self.address_of(slot)
        if current is None:
            raise InvalidPersonError(f"Person has no {slot.value} address.")
        if new_address.address_type != slot:
            raise InvalidPersonError(
                f"Cannot replace the {slot.value} address with a "
                f"{new_address.address_type.value} address.",
            )
        if new_address == current:
            raise InvalidPersonError(
                f"The new {slot.value} address is identical to the current one.",
            )
        self._addresses[slot] = new_address

    def delete(self, deleted_by: str | None, deleted_at: datetime | None = None) -> None:
        """Soft delete. A second call leaves the first deletion details in place."""
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_by = deleted_by
        self.deleted = deleted_at or _utcnow()

    # ─── Audit hooks (persistence layer only) ────────────────────

    def set_creation_details(
        self, created_by: str | None, created_at: datetime | None = None,
    ) -> None:
        self.created_by = created_by
        self.created = created_at or _utcnow()

    def set_last_modified_details(
        self, modified_by: str | None, modified_at: datetime | None = None,
    ) -> None:
        self.last_modified_by = modified_by
        self.last_modified = modified_at or _utcnow()

    def __repr__(self) -> str:
        return (
            f"Person(id={self.id!r}, full_name={self.full_name!r}, "
            f"is_deleted={self.is_deleted!r})"
        )


def _validate_full_name(full_name: object) -> None:
    if not isinstance(full_name, str) or not full_name.strip():
        raise InvalidPersonError("Full name cannot be empty.")
    if len(full_name) > MAX_FULL_NAME_LENGTH:
        raise InvalidPersonError(
            f"Full name cannot exceed {MAX_FULL_NAME_LENGTH} characters.",
        )


def _validate_slot(address: Address | None, expected: AddressType) -> None:
    if address is None:
        raise InvalidPersonError(f"{expected.value} address is required.")
    if not isinstance(address, Address):
        raise InvalidPersonError(
            f"{expected.value} address must be an Address, got {type(address).__name__}.",
        )
    if address.address_type != expected:
        raise InvalidPersonError(
            f"{expected.value} address must have type {expected.value}, "
            f"got {address.address_type.value}.",
        )
