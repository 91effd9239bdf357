"""Tests for GenerationRepository error handling."""

import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from cardforge import models
from cardforge.domain.common.value_objects import GenerationId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard
from cardforge.domain.learning.entities.generation import Generation
from cardforge.exceptions import PersistenceError
from cardforge.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)
from cardforge.infrastructure.learning.repositories.generation_repository import (
    GenerationRepository,
)
from tests.conftest import create_test_generation


def _db_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("database is locked"))


def _generation(owner_id: uuid.UUID) -> Generation:
    return Generation.create(
        id=GenerationId.generate(),
        owner_id=OwnerId(owner_id),
        model="test/model",
        generated_count=3,
        source_text="a" * 1000,
        generation_duration_ms=800,
    )


class TestGenerationRepository:
    def test_add_returns_stored_generation(
        self, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        generation = _generation(owner_id)

        stored = GenerationRepository(db_session).add(generation)

        assert stored.id == generation.id
        assert stored.created_at is not None

    def test_refresh_failure_after_insert_is_a_persistence_error(
        self, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        repository = GenerationRepository(db_session)

        with patch.object(db_session, "refresh", side_effect=_db_error()):
            with pytest.raises(PersistenceError) as exc_info:
                repository.add(_generation(owner_id))

        assert exc_info.value.operation == "generations.add"

    def test_find_owned_ids_keeps_only_own_generations(
        self, db_session: Session, owner_id: uuid.UUID, other_owner_id: uuid.UUID
    ) -> None:
        own = create_test_generation(db_session, owner_id)
        foreign = create_test_generation(db_session, other_owner_id)

        owned = GenerationRepository(db_session).find_owned_ids(
            {GenerationId(own.id), GenerationId(foreign.id)}, OwnerId(owner_id)
        )

        assert owned == {GenerationId(own.id)}

    def test_find_owned_ids_lookup_failure_is_a_persistence_error(
        self, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        repository = GenerationRepository(db_session)

        with patch.object(db_session, "execute", side_effect=_db_error()):
            with pytest.raises(PersistenceError) as exc_info:
                repository.find_owned_ids({GenerationId.generate()}, OwnerId(owner_id))

        assert exc_info.value.operation == "generations.find_owned_ids"


class TestFlashcardRepositoryAddAll:
    def test_refresh_failure_after_insert_is_a_persistence_error(
        self, db_session: Session, owner_id: uuid.UUID
    ) -> None:
        card = Flashcard.create(owner_id=OwnerId(owner_id), front="Q", back="A", source="manual")
        repository = FlashcardRepository(db_session)

        with patch.object(db_session, "refresh", side_effect=_db_error()):
            with pytest.raises(PersistenceError) as exc_info:
                repository.add_all([card])

        assert exc_info.value.operation == "flashcards.add_all"
        assert db_session.query(models.Flashcard).count() == 1
