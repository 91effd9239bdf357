"""Learning API schemas."""

from cardforge.infrastructure.learning.schemas.flashcard_schemas import (
    FailedFlashcard,
    Flashcard,
    FlashcardCreateItem,
    FlashcardDeleteResponse,
    FlashcardsCreateRequest,
    FlashcardsCreateResponse,
    FlashcardUpdateRequest,
)
from cardforge.infrastructure.learning.schemas.generation_schemas import (
    FlashcardSuggestionItem,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
    GenerationErrorLogItem,
    GenerationSummary,
)

__all__ = [
    "FailedFlashcard",
    "Flashcard",
    "FlashcardCreateItem",
    "FlashcardDeleteResponse",
    "FlashcardSuggestionItem",
    "FlashcardUpdateRequest",
    "FlashcardsCreateRequest",
    "FlashcardsCreateResponse",
    "GenerateFlashcardsRequest",
    "GenerateFlashcardsResponse",
    "GenerationErrorLogItem",
    "GenerationSummary",
]
