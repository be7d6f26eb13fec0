"""
Result type for per-item outcomes.

A failed review must not abort the rest of its batch, so the commit of a
single review returns Success or Failure instead of raising.

Example:
    outcome = self._commit_review(user_id, review, now)
    if outcome.is_success:
        committed.append(outcome.unwrap())
    else:
        failures.append(outcome.unwrap_error())
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> None:
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        return self.error


Result = Success[T] | Failure[E]
