"""DTOs for flashcard use cases."""

from dataclasses import dataclass, field
from uuid import UUID

from cardforge.domain.learning.entities.flashcard import Flashcard


@dataclass(frozen=True)
class CreateFlashcardCommand:
    """One item of a bulk create request, not yet validated."""

    front: str
    back: str
    source: str
    generation_id: UUID | None = None


@dataclass(frozen=True)
class FailedItem:
    """A request item that was not persisted, by its position in the request."""

    index: int
    error: str


@dataclass
class BulkCreateResult:
    created: list[Flashcard] = field(default_factory=list)
    failed: list[FailedItem] = field(default_factory=list)

    @property
    def has_created(self) -> bool:
        return bool(self.created)
