"""
Flashcard entity.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from cardforge.constants import FLASHCARD_BACK_MAX_LENGTH, FLASHCARD_FRONT_MAX_LENGTH
from cardforge.domain.common.entity import Entity
from cardforge.domain.common.exceptions import ValidationError
from cardforge.domain.common.value_objects import FlashcardId, GenerationId, OwnerId


class FlashcardSource(StrEnum):
    """Provenance of a persisted flashcard."""

    MANUAL = "manual"
    AI_FULL = "ai-full"
    AI_EDITED = "ai-edited"

    @property
    def is_ai(self) -> bool:
        return self is not FlashcardSource.MANUAL


def _validate_text(value: str, field: str, max_length: int) -> None:
    if not value:
        raise ValidationError(f"{field.capitalize()} text is required", field=field)
    if len(value) > max_length:
        raise ValidationError(
            f"{field.capitalize()} text must not exceed {max_length} characters",
            field=field,
            value=len(value),
        )


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard owned by a single user.

    Business Rules:
    - Front is 1-200 characters, back is 1-500 characters
    - Manual cards have no generation; AI cards must reference one
    """

    id: FlashcardId
    owner_id: OwnerId
    front: str
    back: str
    source: FlashcardSource
    generation_id: GenerationId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_text(self.front, "front", FLASHCARD_FRONT_MAX_LENGTH)
        _validate_text(self.back, "back", FLASHCARD_BACK_MAX_LENGTH)
        if self.source is FlashcardSource.MANUAL and self.generation_id is not None:
            raise ValidationError(
                "For 'manual' source, generation_id must be null", field="generation_id"
            )
        if self.source.is_ai and self.generation_id is None:
            raise ValidationError(
                f"For '{self.source}' source, generation_id is required", field="generation_id"
            )

    def update_content(self, front: str | None = None, back: str | None = None) -> None:
        """
        Replace the front and/or back.

        An unedited AI card becomes 'ai-edited' once its content changes.

        Raises:
            ValidationError: If the new text breaks a length rule
        """
        new_front = self.front if front is None else front
        new_back = self.back if back is None else back
        _validate_text(new_front, "front", FLASHCARD_FRONT_MAX_LENGTH)
        _validate_text(new_back, "back", FLASHCARD_BACK_MAX_LENGTH)

        changed = (new_front, new_back) != (self.front, self.back)
        self.front = new_front
        self.back = new_back
        if changed and self.source is FlashcardSource.AI_FULL:
            self.source = FlashcardSource.AI_EDITED

    @classmethod
    def create(
        cls,
        owner_id: OwnerId,
        front: str,
        back: str,
        source: FlashcardSource | str,
        generation_id: GenerationId | None = None,
    ) -> "Flashcard":
        """Create a new flashcard (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            owner_id=owner_id,
            front=front,
            back=back,
            source=FlashcardSource(source),
            generation_id=generation_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        owner_id: OwnerId,
        front: str,
        back: str,
        source: FlashcardSource | str,
        generation_id: GenerationId | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            owner_id=owner_id,
            front=front,
            back=back,
            source=FlashcardSource(source),
            generation_id=generation_id,
            created_at=created_at,
            updated_at=updated_at,
        )
