"""Use cases for reading flashcards."""

from cardforge.application.common.pagination import PaginatedResult, Pagination, SortOrder
from cardforge.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from cardforge.application.learning.use_cases.exceptions import FlashcardNotFoundError
from cardforge.domain.common.value_objects.ids import FlashcardId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard


class GetFlashcardUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def get_flashcard(self, flashcard_id: int, owner_id: OwnerId) -> Flashcard:
        """
        Get one flashcard of the owner.

        Raises:
            FlashcardNotFoundError: If the flashcard does not exist or belongs to someone else
        """
        flashcard = self.flashcard_repository.find_by_id(FlashcardId(flashcard_id), owner_id)
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)
        return flashcard


class ListFlashcardsUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def list_flashcards(
        self,
        owner_id: OwnerId,
        page: int,
        page_size: int,
        sort_by: str = "created_at",
        order: SortOrder = "desc",
    ) -> PaginatedResult[Flashcard]:
        """List one page of the owner's flashcards."""
        pagination = Pagination(page=page, page_size=page_size, sort_by=sort_by, order=order)
        return self.flashcard_repository.find_page(owner_id, pagination)
