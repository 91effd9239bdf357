"""Common value objects shared across all domain modules."""

from .content_hash import ContentHash
from .ids import FlashcardId, GenerationErrorLogId, GenerationId, OwnerId

__all__ = [
    "ContentHash",
    "FlashcardId",
    "GenerationErrorLogId",
    "GenerationId",
    "OwnerId",
]
