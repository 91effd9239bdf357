"""Mappers for generation ledger ORM ↔ Domain conversion."""

from cardforge.domain.common.value_objects import (
    ContentHash,
    GenerationErrorLogId,
    GenerationId,
    OwnerId,
)
from cardforge.domain.learning.entities.generation import Generation, GenerationErrorLog
from cardforge.models import Generation as GenerationORM
from cardforge.models import GenerationErrorLog as GenerationErrorLogORM


class GenerationMapper:
    def to_domain(self, orm_model: GenerationORM) -> Generation:
        return Generation(
            id=GenerationId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            model=orm_model.model,
            generated_count=orm_model.generated_count,
            source_text_hash=ContentHash(orm_model.source_text_hash),
            source_text_length=orm_model.source_text_length,
            generation_duration_ms=orm_model.generation_duration_ms,
            accepted_edited_count=orm_model.accepted_edited_count,
            accepted_unedited_count=orm_model.accepted_unedited_count,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Generation) -> GenerationORM:
        return GenerationORM(
            id=domain_entity.id.value,
            owner_id=domain_entity.owner_id.value,
            model=domain_entity.model,
            generated_count=domain_entity.generated_count,
            source_text_hash=str(domain_entity.source_text_hash),
            source_text_length=domain_entity.source_text_length,
            generation_duration_ms=domain_entity.generation_duration_ms,
            accepted_edited_count=domain_entity.accepted_edited_count,
            accepted_unedited_count=domain_entity.accepted_unedited_count,
        )


class GenerationErrorLogMapper:
    def to_domain(self, orm_model: GenerationErrorLogORM) -> GenerationErrorLog:
        return GenerationErrorLog(
            id=GenerationErrorLogId(orm_model.id),
            owner_id=OwnerId(orm_model.owner_id),
            model=orm_model.model,
            source_text_hash=ContentHash(orm_model.source_text_hash),
            source_text_length=orm_model.source_text_length,
            error_code=orm_model.error_code,
            error_message=orm_model.error_message,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: GenerationErrorLog) -> GenerationErrorLogORM:
        return GenerationErrorLogORM(
            owner_id=domain_entity.owner_id.value,
            model=domain_entity.model,
            source_text_hash=str(domain_entity.source_text_hash),
            source_text_length=domain_entity.source_text_length,
            error_code=domain_entity.error_code,
            error_message=domain_entity.error_message,
        )
