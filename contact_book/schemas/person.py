"""Person Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - full_name: non-blank, ≤70 chars
    - address lines: non-blank, 2–256 chars
    - phone numbers: match ^\\+\\d+$, 5–20 chars; the list itself is required (may be empty)
    - page_number, page_size: ≥1
    - id / person_id: >0
    - Request models accept snake_case field names and camelCase aliases; responses are snake_case

Design Decisions:
    - Limits imported from core/domain_constants.py: the structural stage and the aggregate
      enforce the same numbers
    - DTOs (PersonDto, AddressDto) are what the read-optimised query path returns
"""

from typing import Annotated

from pydantic import (
    AliasGenerator, BaseModel, ConfigDict, Field, StringConstraints, ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from contact_book.core.domain_constants import (
    DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE,
    MAX_ADDRESS_LENGTH, MIN_ADDRESS_LENGTH, MAX_FULL_NAME_LENGTH,
    MAX_PHONE_NUMBER_LENGTH, MIN_PHONE_NUMBER_LENGTH, PHONE_NUMBER_PATTERN,
)
from contact_book.core.domain_types import AddressType


PhoneNumberStr = Annotated[
    str,
    StringConstraints(
        min_length=MIN_PHONE_NUMBER_LENGTH,
        max_length=MAX_PHONE_NUMBER_LENGTH,
        pattern=PHONE_NUMBER_PATTERN,
    ),
]
FullNameStr = Annotated[str, Field(min_length=1, max_length=MAX_FULL_NAME_LENGTH)]
AddressLineStr = Annotated[
    str, Field(min_length=MIN_ADDRESS_LENGTH, max_length=MAX_ADDRESS_LENGTH),
]
PositiveId = Annotated[int, Field(gt=0)]


def _reject_blank(value: str | None, field_name: str) -> str | None:
    if value is not None and not value.strip():
        raise ValueError(f"{field_name} must not be empty")
    return value


class RequestModel(BaseModel):
    """Base for inbound requests — accepts field names and camelCase aliases."""
    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=to_camel),
        populate_by_name=True,
    )


# --- Commands -----------------------------------------------------------------

class CreatePersonRequest(RequestModel):
    """Create a person together with both addresses."""
    full_name: FullNameStr
    home_address_line: AddressLineStr
    home_phone_numbers: list[PhoneNumberStr]
    business_address_line: AddressLineStr
    business_phone_numbers: list[PhoneNumberStr]

    @field_validator("full_name", "home_address_line", "business_address_line")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        return _reject_blank(v, info.field_name)


class EditPersonRequest(RequestModel):
    """Rename a person."""
    id: PositiveId
    full_name: FullNameStr

    @field_validator("full_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _reject_blank(v, "full_name")


class DeletePersonRequest(RequestModel):
    id: PositiveId


class UpdateAddressRequest(RequestModel):
    """Replace the address of one type."""
    person_id: PositiveId
    address_line: AddressLineStr
    address_type: AddressType
    phone_numbers: list[PhoneNumberStr]

    @field_validator("address_line")
    @classmethod
    def not_blank(cls, v: str) -> str:
        return _reject_blank(v, "address_line")


class UpdateAddressBody(RequestModel):
    """HTTP body for the update-home/business-address routes (type comes from the route)."""
    person_id: PositiveId
    address_line: AddressLineStr
    phone_numbers: list[PhoneNumberStr]


# --- Queries ------------------------------------------------------------------

class GetPersonQuery(RequestModel):
    id: PositiveId


class ListPeopleQuery(RequestModel):
    """Paginated listing with optional case-insensitive name filter."""
    full_name: str | None = Field(None, max_length=MAX_FULL_NAME_LENGTH)
    page_number: int = Field(DEFAULT_PAGE_NUMBER, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1)


# --- Responses ----------------------------------------------------------------

class AddressDto(BaseModel):
    address_line: str
    address_type: AddressType
    phone_numbers: list[str] = []


class PersonDto(BaseModel):
    id: int
    full_name: str
    addresses: list[AddressDto] = []


class PaginatedPeopleResponse(BaseModel):
    items: list[PersonDto]
    page_number: int
    total_pages: int
    total_count: int
    has_previous_page: bool
    has_next_page: bool


class PersonCreatedResponse(BaseModel):
    id: int


class ResultFailureResponse(BaseModel):
    """Body returned when an operation yields a failed Result."""
    errors: list[str] = []
    message: str | None = None
    danger_message: str | None = None
