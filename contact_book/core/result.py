"""Result Envelope — success/failure value returned by every write operation.

Invariants:
    - errors is always empty when succeeded is True
    - data is readable only when succeeded is True; reading it on a failure raises
      ResultDataUnavailableError (a programming error, not a business failure)
    - bool(result) is result.succeeded

Design Decisions:
    - One Generic class covers both the bare and the data-carrying envelope:
      Result.success() carries no data, Result[int].success(7) carries an int
    - Failure factories accept a single message or any iterable of messages
"""

from typing import Generic, Iterable, TypeVar

from contact_book.core.errors import ResultDataUnavailableError

T = TypeVar("T")


class Result(Generic[T]):
    """Outcome of an application operation."""

    __slots__ = ("_succeeded", "_errors", "_data", "message", "danger_message")

    def __init__(
        self,
        succeeded: bool,
        errors: Iterable[str] = (),
        data: T | None = None,
        message: str = "",
        danger_message: str = "",
    ):
        self._succeeded = succeeded
        self._errors = [] if succeeded else list(errors)
        self._data = data
        self.message = message
        self.danger_message = danger_message

    @property
    def succeeded(self) -> bool:
        return self._succeeded

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def data(self) -> T:
        if not self._succeeded:
            raise ResultDataUnavailableError(self.errors)
        return self._data

    def update_message(self, message: str) -> None:
        self.message = message

    def update_danger_message(self, message: str) -> None:
        self.danger_message = message

    def __bool__(self) -> bool:
        return self._succeeded

    def __repr__(self) -> str:
        if self._succeeded:
            return f"Result(succeeded=True, data={self._data!r}, message={self.message!r})"
        return (
            f"Result(succeeded=False, errors={self._errors!r}, "
            f"message={self.message!r}, danger_message={self.danger_message!r})"
        )

    # ─── Factories ───────────────────────────────────────────────

    @classmethod
    def success(cls, data: T | None = None) -> "Result[T]":
        return cls(True, data=data)

    @classmethod
    def failure(cls, errors: str | Iterable[str]) -> "Result[T]":
        if isinstance(errors, str):
            errors = [errors]
        return cls(False, errors=errors)

    @classmethod
    def success_with_message(
        cls, data: T | None = None, message: str = "", danger_message: str = "",
    ) -> "Result[T]":
        return cls(True, data=data, message=message, danger_message=danger_message)

    @classmethod
    def failure_with_message(
        cls,
        message: str = "",
        danger_message: str = "",
        errors: Iterable[str] = (),
    ) -> "Result[T]":
        return cls(
            False, errors=errors, message=message, danger_message=danger_message,
        )
