"""Person Schemas — structural validation rules and camelCase aliases.

Invariants:
    - Field limits mirror the domain constants
    - Request models accept both snake_case names and camelCase aliases
    - page_number / page_size default to 1 / 10 and must be ≥1
"""

import pytest
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from contact_book.core.domain_types import AddressType
from contact_book.schemas.person import (
    CreatePersonRequest,
    DeletePersonRequest,
    EditPersonRequest,
    ListPeopleQuery,
    UpdateAddressBody,
    UpdateAddressRequest,
)


def _create_payload(**overrides):
    payload = {
        "full_name": "Jane Smith",
        "home_address_line": "1 Home Street",
        "home_phone_numbers": ["+11111"],
        "business_address_line": "2 Office Park",
        "business_phone_numbers": [],
    }
    payload.update(overrides)
    return payload


# --- CreatePersonRequest -------------------------------------------------------

def test_create_accepts_valid_payload():
    req = CreatePersonRequest(**_create_payload())
    assert req.full_name == "Jane Smith"
    assert req.business_phone_numbers == []


def test_create_accepts_camel_case_aliases():
    req = CreatePersonRequest.model_validate({
        "fullName": "Jane Smith",
        "homeAddressLine": "1 Home Street",
        "homePhoneNumbers": ["+11111"],
        "businessAddressLine": "2 Office Park",
        "businessPhoneNumbers": ["+22222"],
    })
    assert req.home_address_line == "1 Home Street"
    assert req.business_phone_numbers == ["+22222"]


@pytest.mark.parametrize("field,value", [
    ("full_name", ""),
    ("full_name", "   "),
    ("full_name", "x" * 71),
    ("home_address_line", "x"),
    ("home_address_line", "  "),
    ("business_address_line", "x" * 257),
    ("home_phone_numbers", ["12345"]),
    ("home_phone_numbers", ["+123"]),
    ("business_phone_numbers", ["+" + "1" * 20]),
])
def test_create_rejects_invalid_fields(field, value):
    with pytest.raises(ValidationError) as exc_info:
        CreatePersonRequest(**_create_payload(**{field: value}))
    assert exc_info.value.errors()[0]["loc"][0] in (field, to_camel(field))


def test_create_requires_phone_lists():
    payload = _create_payload()
    del payload["home_phone_numbers"]
    with pytest.raises(ValidationError):
        CreatePersonRequest(**payload)


# --- Edit / Delete -------------------------------------------------------------

def test_edit_requires_positive_id():
    with pytest.raises(ValidationError):
        EditPersonRequest(id=0, full_name="Jane")
    assert EditPersonRequest(id=1, full_name="Jane").id == 1


def test_delete_requires_positive_id():
    with pytest.raises(ValidationError):
        DeletePersonRequest(id=-3)


# --- Addresses -----------------------------------------------------------------

def test_update_address_parses_type():
    req = UpdateAddressRequest.model_validate({
        "personId": 4,
        "addressLine": "5 Side Street",
        "addressType": "Business",
        "phoneNumbers": [],
    })
    assert req.address_type is AddressType.BUSINESS


def test_update_address_rejects_unknown_type():
    with pytest.raises(ValidationError):
        UpdateAddressRequest(
            person_id=1, address_line="5 Side Street",
            address_type="Holiday", phone_numbers=[],
        )


def test_update_address_body_has_no_type():
    body = UpdateAddressBody(person_id=1, address_line="5 Side", phone_numbers=["+12345"])
    assert "address_type" not in body.model_dump()


# --- ListPeopleQuery -----------------------------------------------------------

def test_list_defaults():
    query = ListPeopleQuery()
    assert query.full_name is None
    assert query.page_number == 1
    assert query.page_size == 10


@pytest.mark.parametrize("field", ["page_number", "page_size"])
def test_list_rejects_non_positive_paging(field):
    with pytest.raises(ValidationError):
        ListPeopleQuery(**{field: 0})


def test_list_rejects_long_name_filter():
    with pytest.raises(ValidationError):
        ListPeopleQuery(full_name="x" * 71)
