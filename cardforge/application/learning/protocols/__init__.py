from .completion_client import ChatMessage, CompletionClientProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .generation_error_log_repository import GenerationErrorLogRepositoryProtocol
from .generation_repository import GenerationRepositoryProtocol

__all__ = [
    "ChatMessage",
    "CompletionClientProtocol",
    "FlashcardRepositoryProtocol",
    "GenerationErrorLogRepositoryProtocol",
    "GenerationRepositoryProtocol",
]
