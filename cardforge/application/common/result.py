"""
Tagged result for operations whose failure is an expected outcome.

Model output that cannot be repaired is not exceptional, so the repair step
reports it as a value and lets the caller decide what to raise:

    result = repair_and_validate(content, FLASHCARD_LIST)
    if result.is_failure:
        raise result.unwrap_error()
    cards = result.unwrap()
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    is_success = True
    is_failure = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Success carries no error")

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    is_success = False
    is_failure = True

    def unwrap(self) -> None:
        raise ValueError(f"Failure carries no value: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        return self


Result = Success[T] | Failure[E]
