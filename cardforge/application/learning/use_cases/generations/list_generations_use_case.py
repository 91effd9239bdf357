"""Use cases for reading the generation ledger and error log."""

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.application.learning.protocols.generation_error_log_repository import (
    GenerationErrorLogRepositoryProtocol,
)
from cardforge.application.learning.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.domain.learning.entities.generation import Generation, GenerationErrorLog


class ListGenerationsUseCase:
    def __init__(self, generation_repository: GenerationRepositoryProtocol) -> None:
        self.generation_repository = generation_repository

    def list_generations(
        self, owner_id: OwnerId, page: int, page_size: int
    ) -> PaginatedResult[Generation]:
        """List the owner's generations, newest first."""
        pagination = Pagination(page=page, page_size=page_size)
        return self.generation_repository.find_page(owner_id, pagination)


class ListGenerationErrorLogsUseCase:
    def __init__(self, error_log_repository: GenerationErrorLogRepositoryProtocol) -> None:
        self.error_log_repository = error_log_repository

    def list_error_logs(
        self, owner_id: OwnerId, page: int, page_size: int
    ) -> PaginatedResult[GenerationErrorLog]:
        """List the owner's failed generation attempts, newest first."""
        pagination = Pagination(page=page, page_size=page_size)
        return self.error_log_repository.find_page(owner_id, pagination)
