"""
Lifecycle of a user-triggered request (generate, save).

Replaces scattered is_loading / error / success flags with one state value:

    idle -> in_flight -> success | error
    success | error -> in_flight   (retry)
    any -> idle                    (reset)

Only one request may be in flight per lifecycle; a second start() is
refused. This is the cooperative guard that keeps a session to one
generation and one save at a time.
"""

from enum import StrEnum
from typing import Generic, TypeVar

from cardforge.domain.common.exceptions import InvalidTransitionError

T = TypeVar("T")


class RequestState(StrEnum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    ERROR = "error"


class RequestLifecycle(Generic[T]):
    """State of one kind of request, with its last result or error message."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._state = RequestState.IDLE
        self._result: T | None = None
        self._error: str | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def result(self) -> T | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def in_flight(self) -> bool:
        return self._state is RequestState.IN_FLIGHT

    @property
    def can_start(self) -> bool:
        return not self.in_flight

    def start(self) -> None:
        if self.in_flight:
            raise InvalidTransitionError(f"start {self.name}", str(self._state))
        self._state = RequestState.IN_FLIGHT
        self._error = None

    def succeed(self, result: T) -> None:
        if not self.in_flight:
            raise InvalidTransitionError(f"complete {self.name}", str(self._state))
        self._state = RequestState.SUCCESS
        self._result = result

    def fail(self, message: str) -> None:
        if not self.in_flight:
            raise InvalidTransitionError(f"fail {self.name}", str(self._state))
        self._state = RequestState.ERROR
        self._result = None
        self._error = message

    def reset(self) -> None:
        self._state = RequestState.IDLE
        self._result = None
        self._error = None
