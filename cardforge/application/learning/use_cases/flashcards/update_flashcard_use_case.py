"""Use case for updating flashcards."""

import structlog

from cardforge.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from cardforge.application.learning.use_cases.exceptions import FlashcardNotFoundError
from cardforge.domain.common.value_objects.ids import FlashcardId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard
from cardforge.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def update_flashcard(
        self,
        flashcard_id: int,
        owner_id: OwnerId,
        front: str | None = None,
        back: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's front and/or back.

        An 'ai-full' flashcard becomes 'ai-edited' when its content changes.

        Args:
            flashcard_id: ID of the flashcard to update
            owner_id: Owner of the flashcard
            front: New front text (optional)
            back: New back text (optional)

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If neither front nor back is provided
        """
        if front is None and back is None:
            raise ValidationError(
                "At least one of front or back must be provided", status_code=400
            )

        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id), owner_id)
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        flashcard.update_content(front=front, back=back)
        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("updated_flashcard", flashcard_id=flashcard_id, source=str(flashcard.source))
        return flashcard
