"""Create generations, generation_error_logs and flashcards tables.

Revision ID: 001
Revises:
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "generations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("owner_id", sa.Uuid(), nullable=False, index=True),
        sa.Column("model", sa.String(255), nullable=False),
        sa.Column("generated_count", sa.Integer(), nullable=False),
        sa.Column("source_text_hash", sa.String(64), nullable=False, index=True),
        sa.Column("source_text_length", sa.Integer(), nullable=False),
        sa.Column("generation_duration_ms", sa.Integer(), nullable=False),
        sa.Column("accepted_edited_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("accepted_unedited_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            index=True,
        ),
        sa.CheckConstraint("generated_count >= 0", name="ck_generations_generated_count"),
        sa.CheckConstraint("generation_duration_ms >= 0", name="ck_generations_duration"),
    )

    op.create_table(
        "generation_error_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("owner_id", sa.Uuid(), nullable=False, index=True),
        sa.Column("model", sa.String(255), nullable=False),
        sa.Column("source_text_hash", sa.String(64), nullable=False),
        sa.Column("source_text_length", sa.Integer(), nullable=False),
        sa.Column("error_code", sa.String(100), nullable=False),
        sa.Column("error_message", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            index=True,
        ),
    )

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("owner_id", sa.Uuid(), nullable=False, index=True),
        sa.Column("front", sa.String(200), nullable=False),
        sa.Column("back", sa.String(500), nullable=False),
        sa.Column("source", sa.String(20), nullable=False),
        sa.Column(
            "generation_id",
            sa.Uuid(),
            sa.ForeignKey("generations.id"),
            nullable=True,
            index=True,
        ),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.CheckConstraint(
            "source IN ('manual', 'ai-full', 'ai-edited')", name="ck_flashcards_source"
        ),
        sa.CheckConstraint(
            "(source = 'manual' AND generation_id IS NULL) "
            "OR (source <> 'manual' AND generation_id IS NOT NULL)",
            name="ck_flashcards_source_generation",
        ),
    )
    op.create_index("ix_flashcards_owner_created_at", "flashcards", ["owner_id", "created_at"])


def downgrade() -> None:
    op.drop_index("ix_flashcards_owner_created_at", table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_table("generation_error_logs")
    op.drop_table("generations")
