"""DTOs for flashcard generation use cases."""

from dataclasses import dataclass

from cardforge.domain.common.value_objects.ids import GenerationId
from cardforge.domain.learning.entities.flashcard_suggestion import FlashcardSuggestion


@dataclass(frozen=True)
class GeneratedFlashcards:
    """Suggestions produced by one generation call, before any persistence."""

    generation_id: GenerationId
    model: str
    suggestions: list[FlashcardSuggestion]

    @property
    def generated_count(self) -> int:
        return len(self.suggestions)
