"""
Domain layer exceptions.

Raised when a business rule or an entity invariant is violated. The
application's exception handlers translate them to HTTP responses.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be caught and
    handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: a flashcard front longer than 200 characters.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """Raised when an entity cannot be found for the requesting owner."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidTransitionError(DomainError):
    """
    Raised when a state machine is asked for a transition it does not allow.

    Example: approving a suggestion that was already rejected.
    """

    def __init__(self, action: str, state: str, index: int | None = None) -> None:
        if index is None:
            message = f"Cannot {action} while {state}"
        else:
            message = f"Cannot {action} suggestion {index} in state '{state}'"
        super().__init__(message, {"action": action, "state": state})
        self.action = action
        self.state = state
        self.index = index
