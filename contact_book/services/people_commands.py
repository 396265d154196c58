"""People Commands — CreatePerson, EditPerson, DeletePerson, UpdateAddress.

Invariants:
    - Shape of every command: validate → load → mutate aggregate → commit → Result
    - A missing (or soft-deleted) person yields Result.failure_with_message(not found)
    - Domain rule violations become failed Results; commit errors propagate
    - Nothing is committed when validation or a domain rule fails
    - EditPerson rejects a case-insensitively identical name with "No changes detected"

Design Decisions:
    - One class per command with explicit repository dependency
    - Requests may be passed as validated models or raw mappings; both go through
      validate_request first
"""

import logging
from typing import Any, Mapping

from contact_book.core.domain_types import AddressType
from contact_book.core.person import Person
from contact_book.core.repository_protocols import PersonRepository
from contact_book.core.result import Result
from contact_book.core.value_objects import Address, PhoneNumber
from contact_book.schemas.person import (
    CreatePersonRequest, DeletePersonRequest, EditPersonRequest, UpdateAddressRequest,
)
from contact_book.services.request_pipeline import (
    NO_CHANGES_MESSAGE,
    domain_failures_as_result,
    log_request,
    not_found_message,
    validate_request,
)

logger = logging.getLogger(__name__)


def _build_address(
    address_line: str, address_type: AddressType, phone_numbers: list[str],
) -> Address:
    return Address(
        address_line, address_type, [PhoneNumber(n) for n in phone_numbers],
    )


class CreatePerson:
    """Create a person with home and business addresses; returns the new id."""

    def __init__(self, people: PersonRepository):
        self.people = people

    @domain_failures_as_result(Result[int].failure)
    async def execute(
        self, request: CreatePersonRequest | Mapping[str, Any],
    ) -> Result[int]:
        request = validate_request(CreatePersonRequest, request)
        log_request("CreatePerson", request)

        person = Person(
            request.full_name,
            _build_address(
                request.home_address_line, AddressType.HOME,
                request.home_phone_numbers,
            ),
            _build_address(
                request.business_address_line, AddressType.BUSINESS,
                request.business_phone_numbers,
            ),
        )
        await self.people.add(person)
        await self.people.commit()
        return Result.success(person.id)


class EditPerson:
    """Rename a person."""

    def __init__(self, people: PersonRepository):
        self.people = people

    @domain_failures_as_result(Result.failure)
    async def execute(self, request: EditPersonRequest | Mapping[str, Any]) -> Result:
        request = validate_request(EditPersonRequest, request)
        log_request("EditPerson", request)

        person = await self.people.get_by_id(request.id)
        if person is None:
            return Result.failure_with_message(not_found_message(request.id))

        if person.full_name.casefold() == request.full_name.casefold():
            return Result.failure_with_message(NO_CHANGES_MESSAGE)

        person.update_full_name(request.full_name)
        await self.people.commit()
        return Result.success()


class DeletePerson:
    """Soft-delete a person."""

    def __init__(self, people: PersonRepository, actor: str | None = None):
        self.people = people
        self.actor = actor

    @domain_failures_as_result(Result.failure)
    async def execute(self, request: DeletePersonRequest | Mapping[str, Any]) -> Result:
        request = validate_request(DeletePersonRequest, request)
        log_request("DeletePerson", request)

        person = await self.people.get_by_id(request.id)
        if person is None:
            return Result.failure_with_message(not_found_message(request.id))

        person.delete(self.actor)
        await self.people.commit()
        logger.info(
            f"Person {request.id} soft-deleted", extra={"person_id": request.id},
        )
        return Result.success()


class UpdateAddress:
    """Replace the home or business address of a person."""

    def __init__(self, people: PersonRepository):
        self.people = people

    @domain_failures_as_result(Result.failure)
    async def execute(
        self, request: UpdateAddressRequest | Mapping[str, Any],
    ) -> Result:
        request = validate_request(UpdateAddressRequest, request)
        log_request("UpdateAddress", request)

        person = await self.people.get_by_id(request.person_id)
        if person is None:
            return Result.failure_with_message(not_found_message(request.person_id))

        new_address = _build_address(
            request.address_line, request.address_type, request.phone_numbers,
        )
        person.update_address(request.address_type, new_address)
        await self.people.commit()
        return Result.success()
