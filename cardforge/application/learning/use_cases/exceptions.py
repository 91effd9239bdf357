"""Exceptions for learning use cases."""

from enum import StrEnum

from cardforge.exceptions import CardforgeError, NotFoundError


class GenerationErrorCode(StrEnum):
    """Error codes reported to clients and written to the error log."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    AI_SERVICE_ERROR = "AI_SERVICE_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    EMPTY_RESULTS = "EMPTY_RESULTS"


class GenerationError(CardforgeError):
    """Flashcard generation did not produce a usable result."""

    def __init__(
        self, message: str, code: GenerationErrorCode, status_code: int = 500
    ) -> None:
        self.code = code
        super().__init__(message, status_code=status_code)


class GenerationFailed(GenerationError):
    """The completion call or its output failed; the cause is chained."""

    def __init__(self, message: str) -> None:
        super().__init__(message, GenerationErrorCode.AI_SERVICE_ERROR)


class EmptyResultError(GenerationError):
    """The model answered with a valid but empty list."""

    def __init__(self, message: str) -> None:
        super().__init__(message, GenerationErrorCode.EMPTY_RESULTS, status_code=422)


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int) -> None:
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with id {flashcard_id} not found")
