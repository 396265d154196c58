"""Service test fixtures — async DB, repositories and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the schema uses no
      PostgreSQL-specific features
    - seed_people writes through the aggregate repository so seeded rows carry
      the same audit stamps as API-created ones
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from contact_book.core.domain_types import AddressType
from contact_book.core.person import Person
from contact_book.core.value_objects import Address, PhoneNumber
from contact_book.db.base import Base
from contact_book.infrastructure.database import get_db, DatabaseSessionManager
from contact_book.infrastructure.people_query_repository import (
    SqlAlchemyPeopleQueryRepository,
)
from contact_book.infrastructure.person_repository import SqlAlchemyPersonRepository
import contact_book.infrastructure.database as db_module
from contact_book.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def people(test_db):
    """Aggregate repository over the shared test session."""
    return SqlAlchemyPersonRepository(test_db, actor="tester")


@pytest.fixture
def queries(test_db):
    return SqlAlchemyPeopleQueryRepository(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


def make_person(
    full_name: str = "Jane Smith",
    home_line: str = "1 Home Street",
    home_numbers: tuple[str, ...] = ("+3531111111",),
    business_line: str = "2 Office Park",
    business_numbers: tuple[str, ...] = ("+3532222222",),
) -> Person:
    return Person(
        full_name,
        Address(home_line, AddressType.HOME, [PhoneNumber(n) for n in home_numbers]),
        Address(
            business_line, AddressType.BUSINESS,
            [PhoneNumber(n) for n in business_numbers],
        ),
    )


@pytest.fixture
def person_factory():
    return make_person


@pytest.fixture
async def seed_people(test_session_factory):
    """Insert people through the aggregate repository; returns their ids in order."""

    async def _seed(*names: str) -> list[int]:
        async with test_session_factory() as session:
            repo = SqlAlchemyPersonRepository(session, actor="seeder")
            persons = [make_person(name) for name in names]
            for person in persons:
                await repo.add(person)
            await repo.commit()
            return [p.id for p in persons]

    return _seed
