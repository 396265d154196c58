"""Request Pipeline — structural validation, request logging and the domain-error boundary.

Invariants:
    - validate_request runs before any domain object or store is touched; invalid input
      raises RequestValidationFailedError with field-keyed messages
    - domain_failures_as_result converts DomainRuleViolation into the operation's own
      failure Result; every other exception propagates unchanged
    - Not-found is a returned Result (message from not_found_message), never an exception

Design Decisions:
    - Each operation names its failure factory in the decorator (Result.failure or
      Result[int].failure): no runtime inspection of the return type
    - Request logging at INFO, domain rejections at WARNING
"""

import functools
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from contact_book.core.errors import DomainRuleViolation, RequestValidationFailedError
from contact_book.core.result import Result

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)
ResultT = TypeVar("ResultT", bound=Result)

NOT_FOUND_SUFFIX = "was not found"
NO_CHANGES_MESSAGE = "No changes detected"


def not_found_message(person_id: int) -> str:
    return f"Person with ID {person_id} {NOT_FOUND_SUFFIX}"


def is_not_found(result: Result) -> bool:
    """True for failures produced by a missing aggregate."""
    return not result.succeeded and result.message.endswith(NOT_FOUND_SUFFIX)


def validate_request(
    model: type[RequestT], data: RequestT | Mapping[str, Any],
) -> RequestT:
    """Structural validation stage. Returns the typed request or raises."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        failures: dict[str, list[str]] = defaultdict(list)
        for error in exc.errors():
            name = ".".join(str(loc) for loc in error["loc"]) or model.__name__
            failures[name].append(error["msg"])
        logger.warning(
            f"Validation failed for {model.__name__}: {dict(failures)}",
            extra={"request_name": model.__name__},
        )
        raise RequestValidationFailedError(dict(failures), model.__name__) from exc


def log_request(request_name: str, request: BaseModel) -> None:
    logger.info(
        f"Contact Book request: {request_name} {request.model_dump(mode='json')}",
        extra={"request_name": request_name},
    )


def domain_failures_as_result(
    failure: Callable[[list[str]], ResultT],
) -> Callable[
    [Callable[..., Awaitable[ResultT]]], Callable[..., Awaitable[ResultT]],
]:
    """Decorate an async operation so domain rule violations become `failure([msg])`."""

    def decorator(
        operation: Callable[..., Awaitable[ResultT]],
    ) -> Callable[..., Awaitable[ResultT]]:
        @functools.wraps(operation)
        async def wrapper(*args, **kwargs) -> ResultT:
            try:
                return await operation(*args, **kwargs)
            except DomainRuleViolation as exc:
                logger.warning(
                    f"Domain rule violation in {operation.__qualname__}: {exc.message}",
                    extra={"error_code": exc.code},
                )
                return failure([exc.message])

        return wrapper

    return decorator
