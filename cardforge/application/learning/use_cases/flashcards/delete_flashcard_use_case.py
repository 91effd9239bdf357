"""Use case for deleting flashcards."""

import structlog

from cardforge.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from cardforge.application.learning.use_cases.exceptions import FlashcardNotFoundError
from cardforge.domain.common.value_objects.ids import FlashcardId, OwnerId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    """Use case for deleting flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def delete_flashcard(self, flashcard_id: int, owner_id: OwnerId) -> None:
        """
        Delete a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete
            owner_id: Owner of the flashcard

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        deleted = self.flashcard_repository.delete(FlashcardId(flashcard_id), owner_id)
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
