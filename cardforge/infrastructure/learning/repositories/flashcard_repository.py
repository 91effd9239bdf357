"""Repository for Flashcard domain entities."""

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import FlashcardId, OwnerId
from cardforge.domain.learning.entities.flashcard import Flashcard
from cardforge.exceptions import PersistenceError
from cardforge.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from cardforge.models import Flashcard as FlashcardORM

logger = structlog.get_logger(__name__)

SORTABLE_COLUMNS = {
    "created_at": FlashcardORM.created_at,
    "updated_at": FlashcardORM.updated_at,
    "front": FlashcardORM.front,
    "back": FlashcardORM.back,
}


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_by_id(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> Flashcard | None:
        """
        Find a flashcard by ID with ownership check.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            Flashcard entity if found and owned by the owner, None otherwise
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_page(self, owner_id: OwnerId, pagination: Pagination) -> PaginatedResult[Flashcard]:
        """
        Get one page of the owner's flashcards.

        Unknown sort columns fall back to created_at. Ties are broken by id.
        """
        column = SORTABLE_COLUMNS.get(pagination.sort_by, FlashcardORM.created_at)
        if pagination.order == "asc":
            ordering = (column.asc(), FlashcardORM.id.asc())
        else:
            ordering = (column.desc(), FlashcardORM.id.desc())

        total_stmt = select(func.count(FlashcardORM.id)).where(
            FlashcardORM.owner_id == owner_id.value
        )
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.owner_id == owner_id.value)
            .order_by(*ordering)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return PaginatedResult(
            items=[self.mapper.to_domain(orm) for orm in orm_models],
            total=total,
            pagination=pagination,
        )

    def add_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert new flashcards in one transaction.

        Raises:
            PersistenceError: If the insert fails; the transaction is rolled back
        """
        orm_models = [self.mapper.to_orm(flashcard) for flashcard in flashcards]
        try:
            self.db.add_all(orm_models)
            self.db.commit()
            for orm_model in orm_models:
                self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("flashcard_insert_failed", count=len(orm_models), error=str(e))
            raise PersistenceError(
                "Failed to save flashcards. Please try again.", operation="flashcards.add_all"
            ) from e
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save changes to an existing flashcard.

        Args:
            flashcard: The flashcard entity to save

        Returns:
            Saved flashcard entity with database-generated values
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard.id.value,
            FlashcardORM.owner_id == flashcard.owner_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise ValueError(f"Flashcard {flashcard.id.value} not found")
        self.mapper.to_orm(flashcard, orm_model)
        try:
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                "Failed to update flashcard", operation="flashcards.save"
            ) from e
        return self.mapper.to_domain(orm_model)

    def delete(self, flashcard_id: FlashcardId, owner_id: OwnerId) -> bool:
        """
        Delete a flashcard.

        Args:
            flashcard_id: The flashcard ID
            owner_id: The owner ID for ownership verification

        Returns:
            True if deleted, False if not found
        """
        stmt = select(FlashcardORM).where(
            FlashcardORM.id == flashcard_id.value,
            FlashcardORM.owner_id == owner_id.value,
        )
        flashcard_orm = self.db.execute(stmt).scalar_one_or_none()

        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True
