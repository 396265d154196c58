"""People Queries — GetPerson and ListPeopleWithPagination over the read-optimised path.

Invariants:
    - Pure reads: return raw values (PersonDto | None, PaginatedList[PersonDto]), no Result
    - Structural validation runs before the store is queried
"""

from typing import Any, Mapping

from contact_book.core.pagination import PaginatedList
from contact_book.core.repository_protocols import PeopleQueryRepository
from contact_book.schemas.person import GetPersonQuery, ListPeopleQuery, PersonDto
from contact_book.services.request_pipeline import log_request, validate_request


class GetPerson:
    def __init__(self, queries: PeopleQueryRepository):
        self.queries = queries

    async def execute(
        self, request: GetPersonQuery | Mapping[str, Any],
    ) -> PersonDto | None:
        request = validate_request(GetPersonQuery, request)
        log_request("GetPerson", request)
        return await self.queries.get_person_by_id(request.id)


class ListPeopleWithPagination:
    """Page through people, optionally filtered by a name fragment."""

    def __init__(self, queries: PeopleQueryRepository):
        self.queries = queries

    async def execute(
        self, request: ListPeopleQuery | Mapping[str, Any],
    ) -> PaginatedList[PersonDto]:
        request = validate_request(ListPeopleQuery, request)
        log_request("ListPeopleWithPagination", request)
        return await self.queries.get_people_with_pagination(
            request.full_name, request.page_number, request.page_size,
        )
