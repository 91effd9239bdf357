from .flashcard_generation_service import (
    FLASHCARD_LIST,
    FlashcardDraft,
    FlashcardGenerationService,
    build_system_prompt,
)
from .generation_ledger import GenerationLedger

__all__ = [
    "FLASHCARD_LIST",
    "FlashcardDraft",
    "FlashcardGenerationService",
    "GenerationLedger",
    "build_system_prompt",
]
