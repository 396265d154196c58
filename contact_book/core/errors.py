"""Error Hierarchy — typed, categorized exceptions for all Contact Book failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - DomainRuleViolation subclasses are raised only by core/ value objects and the Person aggregate
    - Domain rule violations never cross the operation boundary (services/request_pipeline.py
      turns them into Result failures); everything else propagates to the global handlers
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContactBookError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: int | None = None
    request_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ContactBookError(Exception):
    """Base exception for all Contact Book errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "person_id": self.context.person_id,
                    "request_name": self.context.request_name,
                },
            }
        }


# ─── Validation Errors (400-level, raised before domain code) ───

class RequestValidationFailedError(ContactBookError):
    """Request is structurally invalid (missing or out-of-range fields)."""
    def __init__(
        self,
        failures: dict[str, list[str]],
        request_name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.request_name = request_name
        super().__init__(
            "One or more validation failures have occurred.",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.failures = failures

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"field": name, "message": msg}
            for name, messages in self.failures.items()
            for msg in messages
        ]
        return response


# ─── Domain Errors (400-level) ──────────────────────────────────

class DomainRuleViolation(ContactBookError):
    """Business rule rejected inside the aggregate."""
    def __init__(
        self, message: str, code: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidPersonError(DomainRuleViolation):
    """Person invariant or update rule violated."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "INVALID_PERSON", context)


class InvalidAddressError(DomainRuleViolation):
    """Address line or type rejected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "INVALID_ADDRESS", context)


class InvalidPhoneNumberError(DomainRuleViolation):
    """Phone number format or length rejected."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "INVALID_PHONE_NUMBER", context)


# ─── Infrastructure / Programming Errors (500-level) ────────────

class DatabaseError(ContactBookError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ResultDataUnavailableError(ContactBookError):
    """Result.data read on a failed result — a caller bug, never a business failure."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Data is not available with a failed result. Errors: {errors}",
            "RESULT_DATA_UNAVAILABLE", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.errors = errors
