"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell at runtime — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Soft-deleted persons are invisible through every method below

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the aggregate itself stays synchronous
    - Write path (PersonRepository) works on aggregates; read path (PeopleQueryRepository)
      returns denormalised DTOs straight from SQL
"""

from typing import TYPE_CHECKING, Protocol

from contact_book.core.domain_types import PersonId
from contact_book.core.pagination import PaginatedList
from contact_book.core.person import Person

if TYPE_CHECKING:
    from contact_book.schemas.person import PersonDto


class PersonRepository(Protocol):
    """Contract for aggregate persistence — implemented by shell."""
    async def get_by_id(self, person_id: PersonId) -> Person | None: ...
    async def add(self, person: Person) -> None: ...
    async def commit(self) -> None: ...


class PeopleQueryRepository(Protocol):
    """Contract for the read-optimised query path — implemented by shell."""
    async def get_person_by_id(self, person_id: PersonId) -> "PersonDto | None": ...
    async def get_people_with_pagination(
        self, full_name: str | None, page_number: int, page_size: int,
    ) -> "PaginatedList[PersonDto]": ...
