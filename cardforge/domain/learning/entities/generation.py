"""Generation ledger entities."""

from dataclasses import dataclass
from datetime import datetime

from cardforge.domain.common.entity import Entity
from cardforge.domain.common.exceptions import ValidationError
from cardforge.domain.common.value_objects import (
    ContentHash,
    GenerationErrorLogId,
    GenerationId,
    OwnerId,
)


@dataclass
class Generation(Entity[GenerationId]):
    """
    Record of one successful generation call.

    Business Rules:
    - Counts and duration are non-negative
    - Only the accepted counters change after creation
    """

    id: GenerationId
    owner_id: OwnerId
    model: str
    generated_count: int
    source_text_hash: ContentHash
    source_text_length: int
    generation_duration_ms: int
    accepted_edited_count: int = 0
    accepted_unedited_count: int = 0
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.model:
            raise ValidationError("Model cannot be empty", field="model")
        for field_name in (
            "generated_count",
            "source_text_length",
            "generation_duration_ms",
            "accepted_edited_count",
            "accepted_unedited_count",
        ):
            if getattr(self, field_name) < 0:
                raise ValidationError(
                    f"{field_name} cannot be negative",
                    field=field_name,
                    value=getattr(self, field_name),
                )

    @classmethod
    def create(
        cls,
        id: GenerationId,
        owner_id: OwnerId,
        model: str,
        generated_count: int,
        source_text: str,
        generation_duration_ms: int,
    ) -> "Generation":
        """Create a ledger record for source text that is hashed, never stored."""
        return cls(
            id=id,
            owner_id=owner_id,
            model=model,
            generated_count=generated_count,
            source_text_hash=ContentHash.compute(source_text),
            source_text_length=len(source_text),
            generation_duration_ms=generation_duration_ms,
        )


@dataclass
class GenerationErrorLog(Entity[GenerationErrorLogId]):
    """Write-once record of a failed generation attempt."""

    id: GenerationErrorLogId
    owner_id: OwnerId
    model: str
    source_text_hash: ContentHash
    source_text_length: int
    error_code: str
    error_message: str
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        model: str,
        source_text: str,
        error_code: str,
        error_message: str,
    ) -> "GenerationErrorLog":
        return cls(
            id=GenerationErrorLogId.generate(),
            owner_id=owner_id,
            model=model,
            source_text_hash=ContentHash.compute(source_text),
            source_text_length=len(source_text),
            error_code=error_code,
            error_message=error_message,
        )
