"""People Routes — HTTP surface for the people operations.

Invariants:
    - Routes never contain business logic: each builds a request, runs one operation
      and translates its Result
    - Failed Result with a not-found message → 404, any other failed Result → 400
      with {"errors", "message", "danger_message"}
    - update-home-address / update-business-address are declared before /{person_id}
      so the literal paths win

Design Decisions:
    - Repositories injected per request through Depends(get_db): one AsyncSession
      is one unit of work
    - Request bodies are validated by FastAPI with the same schemas the operations
      use; the operations accept the validated model unchanged
"""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from contact_book.config import get_settings
from contact_book.core.domain_types import AddressType
from contact_book.core.result import Result
from contact_book.infrastructure.database import get_db
from contact_book.infrastructure.people_query_repository import (
    SqlAlchemyPeopleQueryRepository,
)
from contact_book.infrastructure.person_repository import SqlAlchemyPersonRepository
from contact_book.schemas.person import (
    CreatePersonRequest,
    EditPersonRequest,
    PaginatedPeopleResponse,
    PersonCreatedResponse,
    PersonDto,
    ResultFailureResponse,
    UpdateAddressBody,
    UpdateAddressRequest,
)
from contact_book.services.people_commands import (
    CreatePerson, DeletePerson, EditPerson, UpdateAddress,
)
from contact_book.services.people_queries import GetPerson, ListPeopleWithPagination
from contact_book.services.request_pipeline import is_not_found, not_found_message

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/people", tags=["people"])

ID_MISMATCH_MESSAGE = "Route id and body id do not match"


# ─── Dependencies ───────────────────────────────────────────────

def get_person_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyPersonRepository:
    return SqlAlchemyPersonRepository(db, actor=get_settings().audit_actor)


def get_people_query_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyPeopleQueryRepository:
    return SqlAlchemyPeopleQueryRepository(db)


# ─── Result translation ─────────────────────────────────────────

def failure_response(result: Result) -> JSONResponse:
    """Map a failed Result onto 404 (not found) or 400."""
    status_code = (
        status.HTTP_404_NOT_FOUND if is_not_found(result)
        else status.HTTP_400_BAD_REQUEST
    )
    body = ResultFailureResponse(
        errors=result.errors,
        message=result.message or None,
        danger_message=result.danger_message or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def no_content_or_failure(result: Result) -> Response:
    if result.succeeded:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return failure_response(result)


# ─── Queries ────────────────────────────────────────────────────

@router.get("", response_model=PaginatedPeopleResponse)
async def list_people(
    full_name: str | None = Query(None),
    page_number: int = Query(1),
    page_size: int | None = Query(None),
    queries: SqlAlchemyPeopleQueryRepository = Depends(get_people_query_repository),
):
    """Page through people, optionally filtered by a name fragment."""
    page = await ListPeopleWithPagination(queries).execute({
        "full_name": full_name,
        "page_number": page_number,
        "page_size": (
            get_settings().default_page_size if page_size is None else page_size
        ),
    })
    return PaginatedPeopleResponse(
        items=page.items,
        page_number=page.page_number,
        total_pages=page.total_pages,
        total_count=page.total_count,
        has_previous_page=page.has_previous_page,
        has_next_page=page.has_next_page,
    )


@router.get("/{person_id}", response_model=PersonDto)
async def get_person(
    person_id: int,
    queries: SqlAlchemyPeopleQueryRepository = Depends(get_people_query_repository),
):
    person = await GetPerson(queries).execute({"id": person_id})
    if person is None:
        return failure_response(
            Result.failure_with_message(not_found_message(person_id)),
        )
    return person


# ─── Commands ───────────────────────────────────────────────────

@router.post(
    "", response_model=PersonCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_person(
    body: CreatePersonRequest,
    request: Request,
    people: SqlAlchemyPersonRepository = Depends(get_person_repository),
):
    """Create a person with home and business addresses."""
    result = await CreatePerson(people).execute(body)
    if not result.succeeded:
        return failure_response(result)
    location = str(request.url_for("get_person", person_id=result.data))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=PersonCreatedResponse(id=result.data).model_dump(),
        headers={"Location": location},
    )


@router.put("/update-home-address", status_code=status.HTTP_204_NO_CONTENT)
async def update_home_address(
    body: UpdateAddressBody,
    people: SqlAlchemyPersonRepository = Depends(get_person_repository),
):
    return await _update_address(body, AddressType.HOME, people)


@router.put("/update-business-address", status_code=status.HTTP_204_NO_CONTENT)
async def update_business_address(
    body: UpdateAddressBody,
    people: SqlAlchemyPersonRepository = Depends(get_person_repository),
):
    return await _update_address(body, AddressType.BUSINESS, people)


async def _update_address(
    body: UpdateAddressBody,
    address_type: AddressType,
    people: SqlAlchemyPersonRepository,
) -> Response:
    result = await UpdateAddress(people).execute(
        UpdateAddressRequest(
            person_id=body.person_id,
            address_line=body.address_line,
            address_type=address_type,
            phone_numbers=body.phone_numbers,
        ),
    )
    return no_content_or_failure(result)


@router.put("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def edit_person(
    person_id: int,
    body: EditPersonRequest,
    people: SqlAlchemyPersonRepository = Depends(get_person_repository),
):
    """Rename a person. The id in the route must match the id in the body."""
    if body.id != person_id:
        logger.warning(
            f"Edit rejected: route id {person_id} != body id {body.id}",
            extra={"person_id": person_id},
        )
        return failure_response(Result.failure(ID_MISMATCH_MESSAGE))
    result = await EditPerson(people).execute(body)
    return no_content_or_failure(result)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int,
    people: SqlAlchemyPersonRepository = Depends(get_person_repository),
):
    result = await DeletePerson(people, actor=get_settings().audit_actor).execute(
        {"id": person_id},
    )
    return no_content_or_failure(result)
