"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Literal, Self
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

FlashcardSourceLiteral = Literal["manual", "ai-full", "ai-edited"]


class FlashcardCreateItem(BaseModel):
    """
    One flashcard of a bulk create request.

    Text lengths are checked per item by the use case so that one bad item
    does not reject the whole batch.
    """

    front: str = Field(..., description="Question text for the flashcard")
    back: str = Field(..., description="Answer text for the flashcard")
    source: FlashcardSourceLiteral = Field(..., description="Provenance of the flashcard")
    generation_id: UUID | None = Field(
        None, description="Generation the flashcard came from; null for manual flashcards"
    )

    @model_validator(mode="after")
    def check_source_generation(self) -> Self:
        if self.source == "manual" and self.generation_id is not None:
            raise ValueError("For 'manual' source, generation_id must be null")
        if self.source != "manual" and self.generation_id is None:
            raise ValueError(f"For '{self.source}' source, generation_id is required")
        return self


class FlashcardsCreateRequest(BaseModel):
    """Schema for creating a batch of flashcards."""

    flashcards: list[FlashcardCreateItem] = Field(
        ..., min_length=1, description="Flashcards to create"
    )


class Flashcard(BaseModel):
    """Schema for Flashcard response. The owner is never exposed."""

    id: int
    front: str
    back: str
    source: FlashcardSourceLiteral
    generation_id: UUID | None
    created_at: datetime
    updated_at: datetime


class FailedFlashcard(BaseModel):
    index: int = Field(..., description="Position of the item in the request")
    error: str = Field(..., description="Why the item was not saved")


class FlashcardsCreateResponse(BaseModel):
    """Schema for bulk creation response; also the 422 body when nothing was saved."""

    data: list[Flashcard] = Field(..., description="Created flashcards")
    failed: list[FailedFlashcard] = Field(..., description="Items that were not saved")


class FlashcardUpdateRequest(BaseModel):
    """Schema for updating a flashcard."""

    front: str | None = Field(None, min_length=1, max_length=200, description="New front text")
    back: str | None = Field(None, min_length=1, max_length=500, description="New back text")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
