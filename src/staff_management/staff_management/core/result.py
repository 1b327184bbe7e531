from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .enums import Outcome
from .exceptions import ConflictError, InvalidArgumentError, NotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a service operation.

    Services never raise for the expected failure kinds (missing row, bad
    argument, conflict); they return one of these instead. ``bool(result)``
    is true only for ``Outcome.OK`` so callers can write ``if not svc.unlink(...)``.
    """

    outcome: Outcome
    value: Optional[T] = None
    message: str = ""

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(Outcome.OK, value)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls(Outcome.NOT_FOUND, None, message)

    @classmethod
    def conflict(cls, message: str) -> "Result[T]":
        return cls(Outcome.CONFLICT, None, message)

    @classmethod
    def invalid(cls, message: str) -> "Result[T]":
        return cls(Outcome.INVALID_ARGUMENT, None, message)

    @property
    def is_ok(self) -> bool:
        return self.outcome == Outcome.OK

    def __bool__(self) -> bool:
        return self.is_ok

    def unwrap(self) -> T:
        if self.outcome == Outcome.OK:
            return self.value  # type: ignore[return-value]
        if self.outcome == Outcome.NOT_FOUND:
            raise NotFoundError(self.message)
        if self.outcome == Outcome.CONFLICT:
            raise ConflictError(self.message)
        raise InvalidArgumentError(self.message)
