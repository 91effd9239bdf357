import uuid
from dataclasses import dataclass
from typing import Self

from ..entity import EntityId


@dataclass(frozen=True)
class OwnerId(EntityId):
    """Strongly-typed owner identifier (the identity provider's user id)."""

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValueError("OwnerId must be a UUID")

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build an OwnerId from its string form."""
        return cls(uuid.UUID(raw))


@dataclass(frozen=True)
class GenerationId(EntityId):
    """Strongly-typed generation identifier, assigned when suggestions are produced."""

    value: uuid.UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise ValueError("GenerationId must be a UUID")

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid.uuid4())


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("FlashcardId must be non-negative")

    @classmethod
    def generate(cls) -> "FlashcardId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class GenerationErrorLogId(EntityId):
    """Strongly-typed generation error log identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("GenerationErrorLogId must be non-negative")

    @classmethod
    def generate(cls) -> "GenerationErrorLogId":
        return cls(0)  # Database assigns real ID
