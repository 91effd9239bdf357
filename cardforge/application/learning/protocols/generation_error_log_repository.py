"""Protocol for the generation error log repository."""

from typing import Protocol

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.domain.learning.entities.generation import GenerationErrorLog


class GenerationErrorLogRepositoryProtocol(Protocol):
    def add(self, error_log: GenerationErrorLog) -> GenerationErrorLog:
        """
        Append an error log entry.

        Raises:
            PersistenceError: If the insert fails
        """
        ...

    def find_page(
        self, owner_id: OwnerId, pagination: Pagination
    ) -> PaginatedResult[GenerationErrorLog]:
        """Get one page of the owner's error log entries, newest first."""
        ...
