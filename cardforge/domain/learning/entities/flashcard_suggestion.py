"""AI-proposed flashcard that has not been persisted yet."""

from dataclasses import dataclass, replace
from typing import Literal

from cardforge.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class FlashcardSuggestion(ValueObject):
    """Front/back pair produced by a generation. Its source is always 'ai-full'."""

    front: str
    back: str
    source: Literal["ai-full"] = "ai-full"

    def with_content(self, front: str, back: str) -> "FlashcardSuggestion":
        return replace(self, front=front, back=back)
