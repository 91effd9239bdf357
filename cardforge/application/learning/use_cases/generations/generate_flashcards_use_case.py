"""Use case for generating flashcard suggestions from source text."""

import time

import structlog

from cardforge.application.learning.services.flashcard_generation_service import (
    FlashcardGenerationService,
)
from cardforge.application.learning.services.generation_ledger import GenerationLedger
from cardforge.application.learning.use_cases.dtos.generation_dtos import GeneratedFlashcards
from cardforge.application.learning.use_cases.exceptions import (
    GenerationError,
    GenerationErrorCode,
)
from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class GenerateFlashcardsUseCase:
    """Runs one generation and records the outcome in the ledger."""

    def __init__(
        self,
        generation_service: FlashcardGenerationService,
        ledger: GenerationLedger,
    ) -> None:
        self.generation_service = generation_service
        self.ledger = ledger

    async def generate(
        self, owner_id: OwnerId, source_text: str, num_cards: int | None = None
    ) -> GeneratedFlashcards:
        """
        Generate suggestions and write the ledger record.

        A ledger write failure is logged and does not discard the suggestions.
        Failed generations get a best-effort error log entry.

        Args:
            owner_id: Authenticated owner
            source_text: Text to generate flashcards from (length already validated)
            num_cards: Requested number of flashcards, the configured count when None

        Returns:
            Generated suggestions

        Raises:
            GenerationError: If generation failed or produced nothing
        """
        model = self.generation_service.model
        started = time.perf_counter()
        try:
            result = await self.generation_service.generate(source_text, num_cards)
        except GenerationError as e:
            self.ledger.record_error(owner_id, source_text, model, e.code, e.message)
            raise
        except Exception as e:
            logger.exception("flashcard_generation_unexpected_error", model=model)
            self.ledger.record_error(
                owner_id, source_text, model, GenerationErrorCode.UNKNOWN_ERROR, str(e)
            )
            raise
        duration_ms = int((time.perf_counter() - started) * 1000)

        try:
            self.ledger.record_generation(owner_id, source_text, result, duration_ms)
        except PersistenceError as e:
            logger.error(
                "generation_record_failed",
                generation_id=str(result.generation_id),
                error=e.message,
            )

        return result
