"""Use case for persisting a batch of flashcards."""

from collections import Counter

import structlog

from cardforge.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from cardforge.application.learning.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from cardforge.application.learning.use_cases.dtos.flashcard_dtos import (
    BulkCreateResult,
    CreateFlashcardCommand,
    FailedItem,
)
from cardforge.domain.common.exceptions import DomainError
from cardforge.domain.common.value_objects.ids import GenerationId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard, FlashcardSource
from cardforge.exceptions import PersistenceError

logger = structlog.get_logger(__name__)


class CreateFlashcardsUseCase:
    """
    Validates and inserts curated flashcards item by item.

    Invalid items are reported by their request index while valid ones are
    still persisted. Valid items go to the database in one batch, so a failed
    insert fails all of them with the same error.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        generation_repository: GenerationRepositoryProtocol,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.generation_repository = generation_repository

    def create_flashcards(
        self, owner_id: OwnerId, items: list[CreateFlashcardCommand]
    ) -> BulkCreateResult:
        """
        Create flashcards from a batch of items.

        Args:
            owner_id: Authenticated owner of the new flashcards
            items: Requested flashcards in request order

        Returns:
            Persisted flashcards and the failed items with their reasons.
            Never raises for item failures.
        """
        result = BulkCreateResult()
        candidates: list[tuple[int, Flashcard]] = []

        for index, item in enumerate(items):
            try:
                flashcard = Flashcard.create(
                    owner_id=owner_id,
                    front=item.front,
                    back=item.back,
                    source=item.source,
                    generation_id=GenerationId(item.generation_id) if item.generation_id else None,
                )
            except DomainError as e:
                result.failed.append(FailedItem(index=index, error=e.message))
                continue
            except ValueError as e:
                result.failed.append(FailedItem(index=index, error=str(e)))
                continue
            candidates.append((index, flashcard))

        candidates = self._drop_foreign_generations(owner_id, candidates, result)
        if not candidates:
            result.failed.sort(key=lambda f: f.index)
            self._log_result(result, attempted=len(items))
            return result

        try:
            created = self.flashcard_repository.add_all([fc for _, fc in candidates])
        except PersistenceError as e:
            logger.error("flashcard_batch_insert_failed", count=len(candidates), error=e.message)
            result.failed.extend(
                FailedItem(index=index, error=e.message) for index, _ in candidates
            )
            result.failed.sort(key=lambda f: f.index)
            self._log_result(result, attempted=len(items))
            return result

        result.created = created
        result.failed.sort(key=lambda f: f.index)
        self._increment_accepted_counts(owner_id, created)
        self._log_result(result, attempted=len(items))
        return result

    def _drop_foreign_generations(
        self,
        owner_id: OwnerId,
        candidates: list[tuple[int, Flashcard]],
        result: BulkCreateResult,
    ) -> list[tuple[int, Flashcard]]:
        referenced = {fc.generation_id for _, fc in candidates if fc.generation_id is not None}
        if not referenced:
            return candidates

        owned: set[GenerationId] = set()
        lookup_error: str | None = None
        try:
            owned = self.generation_repository.find_owned_ids(referenced, owner_id)
        except PersistenceError as e:
            logger.error(
                "generation_ownership_check_failed", count=len(referenced), error=e.message
            )
            lookup_error = e.message

        kept = []
        for index, flashcard in candidates:
            if flashcard.generation_id is None:
                kept.append((index, flashcard))
            elif lookup_error is not None:
                result.failed.append(FailedItem(index=index, error=lookup_error))
            elif flashcard.generation_id not in owned:
                result.failed.append(
                    FailedItem(index=index, error=f"Generation {flashcard.generation_id} not found")
                )
            else:
                kept.append((index, flashcard))
        return kept

    def _increment_accepted_counts(self, owner_id: OwnerId, created: list[Flashcard]) -> None:
        edited: Counter[GenerationId] = Counter()
        unedited: Counter[GenerationId] = Counter()
        for flashcard in created:
            if flashcard.generation_id is None:
                continue
            if flashcard.source is FlashcardSource.AI_EDITED:
                edited[flashcard.generation_id] += 1
            else:
                unedited[flashcard.generation_id] += 1

        for generation_id in edited.keys() | unedited.keys():
            try:
                self.generation_repository.increment_accepted_counts(
                    generation_id,
                    owner_id,
                    edited=edited[generation_id],
                    unedited=unedited[generation_id],
                )
            except Exception:
                logger.exception(
                    "generation_accepted_counts_update_failed", generation_id=str(generation_id)
                )

    @staticmethod
    def _log_result(result: BulkCreateResult, attempted: int) -> None:
        logger.info(
            "flashcards_bulk_created",
            attempted=attempted,
            created=len(result.created),
            failed=len(result.failed),
        )
