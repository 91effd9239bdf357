from .flashcard import Flashcard, FlashcardSource
from .flashcard_suggestion import FlashcardSuggestion
from .generation import Generation, GenerationErrorLog

__all__ = [
    "Flashcard",
    "FlashcardSource",
    "FlashcardSuggestion",
    "Generation",
    "GenerationErrorLog",
]
