"""Pydantic schemas for flashcard generation endpoints."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from cardforge.constants import (
    NUM_CARDS_MAX,
    NUM_CARDS_MIN,
    SOURCE_TEXT_MAX_LENGTH,
    SOURCE_TEXT_MIN_LENGTH,
)


class GenerateFlashcardsRequest(BaseModel):
    source_text: str = Field(
        ...,
        min_length=SOURCE_TEXT_MIN_LENGTH,
        max_length=SOURCE_TEXT_MAX_LENGTH,
        description="Text to generate flashcards from",
    )
    num_cards: int | None = Field(
        None,
        ge=NUM_CARDS_MIN,
        le=NUM_CARDS_MAX,
        description="Number of flashcards to ask for. Defaults to the configured count",
    )


class FlashcardSuggestionItem(BaseModel):
    """Schema for a single AI-generated flashcard suggestion."""

    front: str = Field(..., description="Suggested question")
    back: str = Field(..., description="Suggested answer")
    source: Literal["ai-full"] = "ai-full"


class GenerateFlashcardsResponse(BaseModel):
    generation_id: UUID
    model: str
    suggestions: list[FlashcardSuggestionItem]
    generated_count: int


class GenerationSummary(BaseModel):
    """Ledger entry of a successful generation."""

    id: UUID
    model: str
    generated_count: int
    accepted_edited_count: int
    accepted_unedited_count: int
    source_text_length: int
    generation_duration_ms: int
    created_at: datetime


class GenerationErrorLogItem(BaseModel):
    id: int
    model: str
    error_code: str
    error_message: str
    source_text_length: int
    created_at: datetime
