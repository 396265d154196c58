"""Person Repository — SQLAlchemy persistence for the Person aggregate, with audit stamping.

Invariants:
    - get_by_id never returns a soft-deleted person; ids outside 1..MAX_ID are
      not found without touching the database
    - Aggregates returned by get_by_id or passed to add() are tracked until commit()
    - commit() stamps audit details before writing:
        new person        → set_creation_details(actor, now)
        changed person    → set_last_modified_details(actor, now)
        newly soft-deleted → deletion fields only (stamped by Person.delete)
    - An address whose line, type or phone set changed is replaced as a whole row
      (its phone rows go with it via delete-orphan)
    - Ids assigned by the database are written back onto new aggregates after commit

Design Decisions:
    - Rows and aggregates are separate objects: rows are rebuilt into Person via
      Person.reconstitute, so the domain never sees ORM instances
    - Change detection by snapshot comparison of the aggregate's observable state
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.core.domain_constants import MAX_ID
from contact_book.core.domain_types import AddressType
from contact_book.core.person import Person
from contact_book.core.value_objects import Address, PhoneNumber
from contact_book.models.person import AddressRecord, PersonRecord, PhoneNumberRecord

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class _Snapshot:
    full_name: str
    addresses: tuple[Address, ...]
    is_deleted: bool

    @classmethod
    def of(cls, person: Person) -> "_Snapshot":
        return cls(
            full_name=person.full_name,
            addresses=tuple(
                sorted(person.addresses, key=lambda a: a.address_type.value),
            ),
            is_deleted=person.is_deleted,
        )


@dataclass
class _Tracked:
    person: Person
    record: PersonRecord
    snapshot: _Snapshot | None


class SqlAlchemyPersonRepository:
    """Unit-of-work style repository over one AsyncSession."""

    def __init__(
        self,
        db: AsyncSession,
        actor: str | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.db = db
        self.actor = actor
        self._clock = clock
        self._tracked: list[_Tracked] = []

    async def get_by_id(self, person_id: int) -> Person | None:
        if not 0 < person_id <= MAX_ID:
            return None
        result = await self.db.execute(
            select(PersonRecord)
            .where(PersonRecord.id == person_id)
            .where(PersonRecord.is_deleted.is_(False)),
        )
        record = result.scalar_one_or_none()
        if record is None:
            return None
        person = to_domain(record)
        self._tracked.append(_Tracked(person, record, _Snapshot.of(person)))
        return person

    async def add(self, person: Person) -> None:
        record = PersonRecord(full_name=person.full_name, addresses=[])
        self.db.add(record)
        self._tracked.append(_Tracked(person, record, None))

    async def commit(self) -> None:
        now = self._clock()
        for entry in self._tracked:
            self._stamp_audit(entry, now)
            _apply_to_record(entry.person, entry.record)
        await self.db.commit()
        for entry in self._tracked:
            if entry.person.id is None:
                entry.person.id = entry.record.id
                logger.info(
                    f"Person {entry.record.id} created",
                    extra={"person_id": entry.record.id},
                )
            entry.snapshot = _Snapshot.of(entry.person)

    def _stamp_audit(self, entry: _Tracked, now: datetime) -> None:
        person = entry.person
        if entry.snapshot is None:
            if person.created is None:
                person.set_creation_details(self.actor, now)
            return
        current = _Snapshot.of(person)
        if current == entry.snapshot:
            return
        if current.is_deleted and not entry.snapshot.is_deleted:
            return
        person.set_last_modified_details(self.actor, now)


def to_domain(record: PersonRecord) -> Person:
    """Rebuild an aggregate from its rows (trusted path)."""
    addresses = [
        Address(
            a.address_line,
            AddressType(a.address_type),
            [PhoneNumber(p.number) for p in a.phone_numbers],
        )
        for a in record.addresses
    ]
    return Person.reconstitute(
        record.id,
        record.full_name,
        addresses,
        created=record.created,
        created_by=record.created_by,
        last_modified=record.last_modified,
        last_modified_by=record.last_modified_by,
        is_deleted=record.is_deleted,
        deleted=record.deleted,
        deleted_by=record.deleted_by,
    )


def _apply_to_record(person: Person, record: PersonRecord) -> None:
    record.full_name = person.full_name
    record.created = person.created
    record.created_by = person.created_by
    record.last_modified = person.last_modified
    record.last_modified_by = person.last_modified_by
    record.is_deleted = person.is_deleted
    record.deleted = person.deleted
    record.deleted_by = person.deleted_by
    _sync_addresses(person, record)


def _sync_addresses(person: Person, record: PersonRecord) -> None:
    stored = {AddressType(a.address_type): a for a in record.addresses}
    for address in person.addresses:
        existing = stored.get(address.address_type)
        if existing is not None and _matches(existing, address):
            continue
        if existing is not None:
            record.addresses.remove(existing)
        record.addresses.append(_to_address_record(address))


def _matches(row: AddressRecord, address: Address) -> bool:
    return (
        row.address_line == address.address_line
        and sorted(p.number for p in row.phone_numbers)
        == sorted(address.phone_number_values)
    )


def _to_address_record(address: Address) -> AddressRecord:
    return AddressRecord(
        address_line=address.address_line,
        address_type=address.address_type.value,
        phone_numbers=[
            PhoneNumberRecord(number=n) for n in address.phone_number_values
        ],
    )
