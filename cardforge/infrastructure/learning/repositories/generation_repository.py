"""Repository for the generation ledger."""

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import GenerationId, OwnerId
from cardforge.domain.learning.entities.generation import Generation
from cardforge.exceptions import PersistenceError
from cardforge.infrastructure.learning.mappers.generation_mapper import GenerationMapper
from cardforge.models import Generation as GenerationORM

logger = structlog.get_logger(__name__)


class GenerationRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenerationMapper()

    def add(self, generation: Generation) -> Generation:
        """
        Insert a generation record.

        Raises:
            PersistenceError: If the insert fails
        """
        orm_model = self.mapper.to_orm(generation)
        try:
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("generation_insert_failed", generation_id=str(generation.id), error=str(e))
            raise PersistenceError(
                "Failed to record generation", operation="generations.add"
            ) from e
        return self.mapper.to_domain(orm_model)

    def find_owned_ids(
        self, generation_ids: set[GenerationId], owner_id: OwnerId
    ) -> set[GenerationId]:
        if not generation_ids:
            return set()
        stmt = select(GenerationORM.id).where(
            GenerationORM.id.in_([generation_id.value for generation_id in generation_ids]),
            GenerationORM.owner_id == owner_id.value,
        )
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            logger.error("generation_lookup_failed", count=len(generation_ids), error=str(e))
            raise PersistenceError(
                "Failed to look up generations. Please try again.",
                operation="generations.find_owned_ids",
            ) from e
        return {GenerationId(row) for row in rows}

    def increment_accepted_counts(
        self, generation_id: GenerationId, owner_id: OwnerId, *, edited: int, unedited: int
    ) -> None:
        """Add to the accepted counters in a single UPDATE, safe against concurrent saves."""
        stmt = (
            update(GenerationORM)
            .where(
                GenerationORM.id == generation_id.value,
                GenerationORM.owner_id == owner_id.value,
            )
            .values(
                accepted_edited_count=GenerationORM.accepted_edited_count + edited,
                accepted_unedited_count=GenerationORM.accepted_unedited_count + unedited,
            )
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                "Failed to update accepted counts",
                operation="generations.increment_accepted_counts",
            ) from e

    def find_page(self, owner_id: OwnerId, pagination: Pagination) -> PaginatedResult[Generation]:
        total_stmt = select(func.count(GenerationORM.id)).where(
            GenerationORM.owner_id == owner_id.value
        )
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            select(GenerationORM)
            .where(GenerationORM.owner_id == owner_id.value)
            .order_by(GenerationORM.created_at.desc())
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return PaginatedResult(
            items=[self.mapper.to_domain(orm) for orm in orm_models],
            total=total,
            pagination=pagination,
        )
