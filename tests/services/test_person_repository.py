"""Person Repository — aggregate persistence and audit stamping.

Invariants:
    - New people get created/created_by; changed people get last_modified/_by
    - Soft delete stamps only the deletion fields
    - get_by_id hides soft-deleted people
"""

from datetime import datetime, timezone

from sqlalchemy import text

from contact_book.core.domain_types import AddressType
from contact_book.core.value_objects import Address, PhoneNumber
from contact_book.infrastructure.person_repository import SqlAlchemyPersonRepository
from contact_book.models.person import PersonRecord

CREATED_AT = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
MODIFIED_AT = datetime(2024, 2, 1, 9, 0, tzinfo=timezone.utc)


def _naive(value: datetime) -> datetime:
    return value.replace(tzinfo=None)


async def _add(session_factory, person, clock=lambda: CREATED_AT) -> int:
    async with session_factory() as db:
        repo = SqlAlchemyPersonRepository(db, actor="creator", clock=clock)
        await repo.add(person)
        await repo.commit()
    return person.id


async def _record(session_factory, person_id) -> PersonRecord:
    async with session_factory() as db:
        return await db.get(PersonRecord, person_id)


async def test_add_stamps_creation_details(test_session_factory, person_factory):
    person = person_factory()
    person_id = await _add(test_session_factory, person)

    assert person_id is not None
    assert person.created == CREATED_AT
    assert person.created_by == "creator"
    record = await _record(test_session_factory, person_id)
    assert record.created_by == "creator"
    assert _naive(record.created) == _naive(CREATED_AT)
    assert record.last_modified is None


async def test_get_by_id_rebuilds_aggregate(test_session_factory, person_factory):
    person_id = await _add(
        test_session_factory,
        person_factory(home_numbers=("+11111", "+22222")),
    )

    async with test_session_factory() as db:
        loaded = await SqlAlchemyPersonRepository(db).get_by_id(person_id)

    assert loaded.id == person_id
    assert loaded.full_name == "Jane Smith"
    assert sorted(loaded.home_address.phone_number_values) == ["+11111", "+22222"]
    assert loaded.business_address.address_type is AddressType.BUSINESS
    assert loaded.created_by == "creator"


async def test_change_stamps_last_modified(test_session_factory, person_factory):
    person_id = await _add(test_session_factory, person_factory())

    async with test_session_factory() as db:
        repo = SqlAlchemyPersonRepository(db, actor="editor", clock=lambda: MODIFIED_AT)
        person = await repo.get_by_id(person_id)
        person.update_full_name("Jane Doe")
        await repo.commit()

    record = await _record(test_session_factory, person_id)
    assert record.full_name == "Jane Doe"
    assert record.last_modified_by == "editor"
    assert _naive(record.last_modified) == _naive(MODIFIED_AT)
    assert record.created_by == "creator"


async def test_unchanged_aggregate_is_not_stamped(test_session_factory, person_factory):
    person_id = await _add(test_session_factory, person_factory())

    async with test_session_factory() as db:
        repo = SqlAlchemyPersonRepository(db, actor="editor")
        await repo.get_by_id(person_id)
        await repo.commit()

    record = await _record(test_session_factory, person_id)
    assert record.last_modified is None


async def test_soft_delete_stamps_only_deletion(test_session_factory, person_factory):
    person_id = await _add(test_session_factory, person_factory())

    async with test_session_factory() as db:
        repo = SqlAlchemyPersonRepository(db, actor="admin")
        person = await repo.get_by_id(person_id)
        person.delete("admin")
        await repo.commit()

    record = await _record(test_session_factory, person_id)
    assert record.is_deleted is True
    assert record.deleted_by == "admin"
    assert record.last_modified is None

    async with test_session_factory() as db:
        assert await SqlAlchemyPersonRepository(db).get_by_id(person_id) is None


async def test_address_replacement_rewrites_phone_rows(test_session_factory, person_factory):
    person_id = await _add(test_session_factory, person_factory())

    async with test_session_factory() as db:
        repo = SqlAlchemyPersonRepository(db)
        person = await repo.get_by_id(person_id)
        person.update_address(
            AddressType.HOME,
            Address("9 New Road", AddressType.HOME, [PhoneNumber("+99999")]),
        )
        await repo.commit()

    async with test_session_factory() as db:
        reloaded = await SqlAlchemyPersonRepository(db).get_by_id(person_id)
    assert reloaded.home_address.address_line == "9 New Road"
    assert reloaded.home_address.phone_number_values == ["+99999"]
    assert reloaded.business_address.address_line == "2 Office Park"


async def test_rows_inserted_without_is_deleted_are_active(test_db):
    await test_db.execute(text("INSERT INTO people (full_name) VALUES ('Raw Row')"))

    is_deleted = (
        await test_db.execute(text("SELECT is_deleted FROM people"))
    ).scalar_one()

    assert not is_deleted


async def test_get_by_id_beyond_id_range_is_none(people):
    assert await people.get_by_id(2**63) is None
