from .flashcard_repository import FlashcardRepository
from .generation_error_log_repository import GenerationErrorLogRepository
from .generation_repository import GenerationRepository

__all__ = ["FlashcardRepository", "GenerationErrorLogRepository", "GenerationRepository"]
