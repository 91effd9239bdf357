"""Repository for generation error log entries."""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cardforge.application.common.pagination import PaginatedResult, Pagination
from cardforge.domain.common.value_objects.ids import OwnerId
from cardforge.domain.learning.entities.generation import GenerationErrorLog
from cardforge.exceptions import PersistenceError
from cardforge.infrastructure.learning.mappers.generation_mapper import GenerationErrorLogMapper
from cardforge.models import GenerationErrorLog as GenerationErrorLogORM


class GenerationErrorLogRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenerationErrorLogMapper()

    def add(self, error_log: GenerationErrorLog) -> GenerationErrorLog:
        """
        Append an error log entry.

        Raises:
            PersistenceError: If the insert fails
        """
        orm_model = self.mapper.to_orm(error_log)
        try:
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                "Failed to record generation error", operation="generation_error_logs.add"
            ) from e
        return self.mapper.to_domain(orm_model)

    def find_page(
        self, owner_id: OwnerId, pagination: Pagination
    ) -> PaginatedResult[GenerationErrorLog]:
        total_stmt = select(func.count(GenerationErrorLogORM.id)).where(
            GenerationErrorLogORM.owner_id == owner_id.value
        )
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            select(GenerationErrorLogORM)
            .where(GenerationErrorLogORM.owner_id == owner_id.value)
            .order_by(GenerationErrorLogORM.created_at.desc(), GenerationErrorLogORM.id.desc())
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return PaginatedResult(
            items=[self.mapper.to_domain(orm) for orm in orm_models],
            total=total,
            pagination=pagination,
        )
