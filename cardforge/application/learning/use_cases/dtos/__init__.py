"""DTOs for learning use cases."""

from cardforge.application.learning.use_cases.dtos.flashcard_dtos import (
    BulkCreateResult,
    CreateFlashcardCommand,
    FailedItem,
)
from cardforge.application.learning.use_cases.dtos.generation_dtos import GeneratedFlashcards

__all__ = ["BulkCreateResult", "CreateFlashcardCommand", "FailedItem", "GeneratedFlashcards"]
