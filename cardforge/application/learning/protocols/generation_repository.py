"""Protocol for the generation ledger repository."""

from typing import Protocol

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import GenerationId, OwnerId
from cardforge.domain.learning.entities.generation import Generation


class GenerationRepositoryProtocol(Protocol):
    def add(self, generation: Generation) -> Generation:
        """
        Insert a generation record.

        Raises:
            PersistenceError: If the insert fails
        """
        ...

    def find_owned_ids(
        self, generation_ids: set[GenerationId], owner_id: OwnerId
    ) -> set[GenerationId]:
        """
        Return the subset of generation_ids that exist and belong to the owner.

        Raises:
            PersistenceError: If the lookup fails
        """
        ...

    def increment_accepted_counts(
        self, generation_id: GenerationId, owner_id: OwnerId, *, edited: int, unedited: int
    ) -> None:
        """Add to the accepted counters of one generation."""
        ...

    def find_page(self, owner_id: OwnerId, pagination: Pagination) -> PaginatedResult[Generation]:
        """Get one page of the owner's generations, newest first."""
        ...
