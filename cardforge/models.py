"""SQLAlchemy ORM models."""

import uuid
from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cardforge.database import Base


class Generation(Base):
    """One successful AI generation call (the generation ledger)."""

    __tablename__ = "generations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    generated_count: Mapped[int] = mapped_column(Integer, nullable=False)
    source_text_hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)
    generation_duration_ms: Mapped[int] = mapped_column(Integer, nullable=False)
    accepted_edited_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    accepted_unedited_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    flashcards: Mapped[list["Flashcard"]] = relationship(back_populates="generation")

    __table_args__ = (
        CheckConstraint("generated_count >= 0", name="ck_generations_generated_count"),
        CheckConstraint("generation_duration_ms >= 0", name="ck_generations_duration"),
    )


class GenerationErrorLog(Base):
    """Append-only record of a failed generation attempt."""

    __tablename__ = "generation_error_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    source_text_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    source_text_length: Mapped[int] = mapped_column(Integer, nullable=False)
    error_code: Mapped[str] = mapped_column(String(100), nullable=False)
    error_message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )


class Flashcard(Base):
    """Persisted flashcard owned by a single user."""

    __tablename__ = "flashcards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    front: Mapped[str] = mapped_column(String(200), nullable=False)
    back: Mapped[str] = mapped_column(String(500), nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False)
    generation_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("generations.id"), nullable=True, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    generation: Mapped[Generation | None] = relationship(back_populates="flashcards")

    __table_args__ = (
        CheckConstraint(
            "source IN ('manual', 'ai-full', 'ai-edited')", name="ck_flashcards_source"
        ),
        CheckConstraint(
            "(source = 'manual' AND generation_id IS NULL) "
            "OR (source <> 'manual' AND generation_id IS NOT NULL)",
            name="ck_flashcards_source_generation",
        ),
        Index("ix_flashcards_owner_created_at", "owner_id", "created_at"),
    )
