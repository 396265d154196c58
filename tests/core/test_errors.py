"""Error Hierarchy — codes, HTTP statuses and the REST envelope."""

from contact_book.core.errors import (
    ContactBookError,
    DatabaseError,
    DomainRuleViolation,
    ErrorCategory,
    InvalidAddressError,
    InvalidPersonError,
    RequestValidationFailedError,
)


def test_domain_errors_share_base():
    for err in (InvalidPersonError("x"), InvalidAddressError("y")):
        assert isinstance(err, DomainRuleViolation)
        assert isinstance(err, ContactBookError)
        assert err.category is ErrorCategory.BUSINESS_RULE
        assert err.http_status == 400


def test_to_response_envelope():
    body = InvalidPersonError("Full name cannot be empty.").to_response()["error"]
    assert body["code"] == "INVALID_PERSON"
    assert body["message"] == "Full name cannot be empty."
    assert body["category"] == "business_rule"
    assert body["severity"] == "warning"
    assert "timestamp" in body


def test_validation_error_lists_every_failure():
    err = RequestValidationFailedError(
        {"full_name": ["too long"], "id": ["must be > 0", "required"]},
        "EditPersonRequest",
    )
    body = err.to_response()["error"]
    assert body["context"]["request_name"] == "EditPersonRequest"
    assert len(body["details"]) == 3
    assert {"field": "full_name", "message": "too long"} in body["details"]


def test_database_error_is_503():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.operation == "execute"
    assert err.category is ErrorCategory.DATABASE
