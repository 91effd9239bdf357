"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import FlashcardId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            Flashcard entity if found and owned by the owner, None otherwise
        """
        ...

    def find_page(self, owner_id: OwnerId, pagination: Pagination) -> PaginatedResult[Flashcard]:
        """
        Get one page of the owner's flashcards.

        Args:
            owner_id: The owner ID
            pagination: Page, page size and sort parameters

        Returns:
            Page of flashcard entities with the total count
        """
        ...

    def add_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert a batch of new flashcards in a single transaction.

        Args:
            flashcards: Flashcard entities without database ids

        Returns:
            Persisted entities with database-generated values, in input order

        Raises:
            PersistenceError: If the batch insert fails; nothing is persisted
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save changes to an existing flashcard.

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            True if deleted, False if not found
        """
        ...
