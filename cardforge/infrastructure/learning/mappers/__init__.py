from .flashcard_mapper import FlashcardMapper
from .generation_mapper import GenerationErrorLogMapper, GenerationMapper

__all__ = ["FlashcardMapper", "GenerationErrorLogMapper", "GenerationMapper"]
