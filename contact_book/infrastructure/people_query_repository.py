"""People Query Repository — read-optimised SQL path returning denormalised DTOs.

Invariants:
    - Soft-deleted people never appear
    - Listing filters by case-insensitive substring of full_name (when non-blank),
      orders by id ascending, pages with OFFSET (page_number - 1) * page_size
    - total_count counts every matching person, not just the current page
    - A page starting at or past total_count is empty and never reaches the database,
      so oversized page numbers and sizes cannot overflow the driver
    - Ids outside 1..MAX_ID are not found without querying
    - One joined row per phone number; rows folded back into PersonDto/AddressDto

Design Decisions:
    - Core SELECTs over ORM entities: no aggregate rebuild, no identity map
    - The page of person ids is a subquery so LIMIT applies to people, not joined rows
    - LIKE wildcards in the user's filter are escaped
    - Both sides are folded by the database's lower(). PostgreSQL folds every letter;
      SQLite folds ASCII only, so "émile" does not match "Émile" there
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.core.domain_constants import MAX_ID
from contact_book.core.domain_types import AddressType
from contact_book.core.pagination import PaginatedList, page_offset
from contact_book.models.person import AddressRecord, PersonRecord, PhoneNumberRecord
from contact_book.schemas.person import AddressDto, PersonDto

LIKE_ESCAPE = "/"


class SqlAlchemyPeopleQueryRepository:
    """Read-side repository over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_person_by_id(self, person_id: int) -> PersonDto | None:
        if not 0 < person_id <= MAX_ID:
            return None
        people = (
            select(PersonRecord.id, PersonRecord.full_name)
            .where(PersonRecord.id == person_id)
            .where(PersonRecord.is_deleted.is_(False))
            .subquery()
        )
        rows = (await self.db.execute(_joined_rows(people))).all()
        mapped = _map_rows(rows)
        return mapped[0] if mapped else None

    async def get_people_with_pagination(
        self, full_name: str | None, page_number: int, page_size: int,
    ) -> PaginatedList[PersonDto]:
        conditions = [PersonRecord.is_deleted.is_(False)]
        if full_name and full_name.strip():
            conditions.append(_name_contains(full_name))

        total_count = (
            await self.db.execute(
                select(func.count()).select_from(PersonRecord).where(*conditions),
            )
        ).scalar_one()

        offset = page_offset(page_number, page_size)
        items: list[PersonDto] = []
        if offset < total_count:
            page = (
                select(PersonRecord.id, PersonRecord.full_name)
                .where(*conditions)
                .order_by(PersonRecord.id)
                .limit(min(page_size, total_count - offset))
                .offset(offset)
                .subquery()
            )
            rows = (await self.db.execute(_joined_rows(page))).all()
            items = _map_rows(rows)

        return PaginatedList(
            items=items,
            total_count=total_count,
            page_number=page_number,
            page_size=page_size,
        )


def _name_contains(fragment: str):
    """lower(full_name) LIKE lower('%fragment%'), with LIKE wildcards escaped."""
    escaped = (
        fragment.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return func.lower(PersonRecord.full_name).like(
        func.lower(f"%{escaped}%"), escape=LIKE_ESCAPE,
    )


def _joined_rows(people) -> Select:
    return (
        select(
            people.c.id,
            people.c.full_name,
            AddressRecord.id.label("address_id"),
            AddressRecord.address_line,
            AddressRecord.address_type,
            PhoneNumberRecord.number,
        )
        .select_from(people)
        .outerjoin(AddressRecord, AddressRecord.person_id == people.c.id)
        .outerjoin(
            PhoneNumberRecord, PhoneNumberRecord.address_id == AddressRecord.id,
        )
        .order_by(people.c.id, AddressRecord.id, PhoneNumberRecord.id)
    )


def _map_rows(rows) -> list[PersonDto]:
    """Fold joined rows into DTOs, preserving row order."""
    people: dict[int, PersonDto] = {}
    addresses: dict[int, AddressDto] = {}
    for row in rows:
        person = people.get(row.id)
        if person is None:
            person = PersonDto(id=row.id, full_name=row.full_name, addresses=[])
            people[row.id] = person

        if row.address_id is None:
            continue

        address = addresses.get(row.address_id)
        if address is None:
            address = AddressDto(
                address_line=row.address_line,
                address_type=AddressType(row.address_type),
                phone_numbers=[],
            )
            addresses[row.address_id] = address
            person.addresses.append(address)

        if row.number is not None:
            address.phone_numbers.append(row.number)
    return list(people.values())
