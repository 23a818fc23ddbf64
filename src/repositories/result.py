"""
Result type returned by every repository operation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    """Why a repository call failed."""
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class RepositoryResult(Generic[T]):
    """
    Outcome of a repository call.

    A result is truthy on success and falsy on failure, so callers that only
    care whether the call worked can write ``if not result``. Callers that
    need to tell bad input from a storage outage inspect ``failure``.

    Lookups that match nothing are successes holding an empty list.
    """
    value: Optional[T] = None
    failure: Optional[FailureKind] = None
    detail: str = ""

    def __bool__(self) -> bool:
        return self.failure is None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def first(self) -> Optional[Any]:
        """The leading row of a successful lookup, or None."""
        if self.failure is not None or not isinstance(self.value, list) or not self.value:
            return None
        return self.value[0]

    @classmethod
    def success(cls, value: T) -> "RepositoryResult[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, detail: str) -> "RepositoryResult[T]":
        return cls(failure=FailureKind.INVALID_INPUT, detail=detail)

    @classmethod
    def conflict(cls, detail: str) -> "RepositoryResult[T]":
        return cls(failure=FailureKind.CONFLICT, detail=detail)

    @classmethod
    def storage_error(cls, detail: str) -> "RepositoryResult[T]":
        return cls(failure=FailureKind.STORAGE_ERROR, detail=detail)
