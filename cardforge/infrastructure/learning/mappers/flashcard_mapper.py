"""Mapper for Flashcard ORM ↔ Domain conversion."""

from cardforge.domain.common.value_objects import FlashcardId, GenerationId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard
from cardforge.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            front=orm_model.front,
            back=orm_model.back,
            source=orm_model.source,
            generation_id=(
                GenerationId(orm_model.generation_id) if orm_model.generation_id else None
            ),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        generation_id = domain_entity.generation_id.value if domain_entity.generation_id else None
        if orm_model:
            # Owner and generation never change after creation
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.source = str(domain_entity.source)
            return orm_model

        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            owner_id=domain_entity.owner_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            source=str(domain_entity.source),
            generation_id=generation_id,
        )
