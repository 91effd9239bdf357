"""Audit trail of generation attempts."""

import structlog

from cardforge.application.learning.protocols.generation_error_log_repository import (
    GenerationErrorLogRepositoryProtocol,
)
from cardforge.application.learning.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from cardforge.application.learning.use_cases.dtos.generation_dtos import GeneratedFlashcards
from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.domain.learning.entities.generation import Generation, GenerationErrorLog

logger = structlog.get_logger(__name__)


class GenerationLedger:
    """Writes one ledger row per successful generation and one log row per failure."""

    def __init__(
        self,
        generation_repository: GenerationRepositoryProtocol,
        error_log_repository: GenerationErrorLogRepositoryProtocol,
    ) -> None:
        self.generation_repository = generation_repository
        self.error_log_repository = error_log_repository

    def record_generation(
        self,
        owner_id: OwnerId,
        source_text: str,
        result: GeneratedFlashcards,
        duration_ms: int,
    ) -> Generation:
        """
        Insert the ledger record for a successful generation.

        Only the hash and length of the source text are stored.

        Raises:
            PersistenceError: If the insert fails
        """
        generation = Generation.create(
            id=result.generation_id,
            owner_id=owner_id,
            model=result.model,
            generated_count=result.generated_count,
            source_text=source_text,
            generation_duration_ms=duration_ms,
        )
        saved = self.generation_repository.add(generation)
        logger.info(
            "generation_recorded",
            generation_id=str(saved.id),
            generated_count=saved.generated_count,
            duration_ms=duration_ms,
        )
        return saved

    def record_error(
        self,
        owner_id: OwnerId,
        source_text: str,
        model: str,
        error_code: str,
        error_message: str,
    ) -> None:
        """Append an error log entry. Never raises; a failed write is only logged."""
        try:
            error_log = GenerationErrorLog.create(
                owner_id=owner_id,
                model=model,
                source_text=source_text,
                error_code=error_code,
                error_message=error_message,
            )
            self.error_log_repository.add(error_log)
        except Exception:
            logger.exception(
                "generation_error_log_failed", error_code=error_code, model=model
            )
            return
        logger.info("generation_error_recorded", error_code=error_code, model=model)
