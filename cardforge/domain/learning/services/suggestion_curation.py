"""
Review workflow for AI flashcard suggestions.

Pure domain service with no infrastructure dependencies. One instance holds
the review state of a single generation result.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from cardforge.domain.common.exceptions import InvalidTransitionError
from cardforge.domain.learning.entities.flashcard import FlashcardSource
from cardforge.domain.learning.entities.flashcard_suggestion import FlashcardSuggestion


class CurationStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    EDITED = "edited"
    REJECTED = "rejected"


_SAVEABLE = frozenset({CurationStatus.APPROVED, CurationStatus.EDITED})
_EDITABLE = frozenset({CurationStatus.PENDING, CurationStatus.APPROVED})


@dataclass
class EditBuffer:
    """In-progress edit of one suggestion."""

    index: int
    front: str
    back: str


@dataclass(frozen=True)
class CuratedFlashcard:
    """A suggestion the user kept, with the provenance it is saved under."""

    index: int
    front: str
    back: str
    source: FlashcardSource


class SuggestionCuration:
    """
    Per-suggestion review state.

    Transitions:
        pending  -> approved   (approve)
        pending  -> editing    (start_edit) -> edited (save_edit)
        approved -> editing    (start_edit) -> edited (save_edit)
        editing  -> previous   (cancel_edit)
        edited   -> pending    (undo_edit, restores the AI text)
        pending  -> rejected   (reject)

    Approve and reject are only available on pending suggestions. A
    rejected suggestion accepts no further action; only reset() starts
    over. A single edit buffer is shared, so at most one suggestion is
    being edited at a time.
    """

    def __init__(self, suggestions: Sequence[FlashcardSuggestion] = ()) -> None:
        self._original: list[FlashcardSuggestion] = []
        self._current: list[FlashcardSuggestion] = []
        self._statuses: list[CurationStatus] = []
        self._edit: EditBuffer | None = None
        self.reset(suggestions)

    def reset(self, suggestions: Sequence[FlashcardSuggestion]) -> None:
        """Start reviewing a new suggestion set; every item becomes pending."""
        self._original = list(suggestions)
        self._current = list(suggestions)
        self._statuses = [CurationStatus.PENDING] * len(self._original)
        self._edit = None

    def __len__(self) -> int:
        return len(self._current)

    @property
    def suggestions(self) -> list[FlashcardSuggestion]:
        """Suggestions with saved edits applied."""
        return list(self._current)

    @property
    def statuses(self) -> list[CurationStatus]:
        return list(self._statuses)

    def status(self, index: int) -> CurationStatus:
        self._check_index(index)
        return self._statuses[index]

    def original(self, index: int) -> FlashcardSuggestion:
        self._check_index(index)
        return self._original[index]

    @property
    def edit_buffer(self) -> EditBuffer | None:
        return self._edit

    @property
    def editing_index(self) -> int | None:
        return self._edit.index if self._edit else None

    def is_editing(self, index: int) -> bool:
        return self.editing_index == index

    # Enablement rules

    def _is_open(self, index: int) -> bool:
        self._check_index(index)
        return self._statuses[index] is CurationStatus.PENDING and not self.is_editing(index)

    def can_approve(self, index: int) -> bool:
        return self._is_open(index)

    def can_reject(self, index: int) -> bool:
        return self._is_open(index)

    def can_edit(self, index: int) -> bool:
        self._check_index(index)
        return self._statuses[index] in _EDITABLE and self._edit is None

    def can_undo_edit(self, index: int) -> bool:
        self._check_index(index)
        return self._statuses[index] is CurationStatus.EDITED

    # Actions

    def approve(self, index: int) -> None:
        if not self.can_approve(index):
            raise InvalidTransitionError("approve", self._state_name(index), index)
        self._statuses[index] = CurationStatus.APPROVED

    def reject(self, index: int) -> None:
        if not self.can_reject(index):
            raise InvalidTransitionError("reject", self._state_name(index), index)
        self._statuses[index] = CurationStatus.REJECTED

    def start_edit(self, index: int) -> EditBuffer:
        if not self.can_edit(index):
            raise InvalidTransitionError("edit", self._state_name(index), index)
        suggestion = self._current[index]
        self._edit = EditBuffer(index=index, front=suggestion.front, back=suggestion.back)
        return self._edit

    def update_edit(self, front: str | None = None, back: str | None = None) -> EditBuffer:
        if self._edit is None:
            raise InvalidTransitionError("change edit", "not editing")
        if front is not None:
            self._edit.front = front
        if back is not None:
            self._edit.back = back
        return self._edit

    def save_edit(self) -> int:
        """Apply the edit buffer to its suggestion and mark it edited."""
        if self._edit is None:
            raise InvalidTransitionError("save edit", "not editing")
        edit = self._edit
        self._current[edit.index] = self._current[edit.index].with_content(edit.front, edit.back)
        self._statuses[edit.index] = CurationStatus.EDITED
        self._edit = None
        return edit.index

    def cancel_edit(self) -> None:
        """Discard the edit buffer; the suggestion and its status stay as they were."""
        if self._edit is None:
            raise InvalidTransitionError("cancel edit", "not editing")
        self._edit = None

    def undo_edit(self, index: int) -> None:
        if not self.can_undo_edit(index):
            raise InvalidTransitionError("undo edit", self._state_name(index), index)
        self._current[index] = self._original[index]
        self._statuses[index] = CurationStatus.PENDING

    # Save eligibility

    def eligible_indexes(self) -> list[int]:
        return [i for i, status in enumerate(self._statuses) if status in _SAVEABLE]

    @property
    def eligible_count(self) -> int:
        return len(self.eligible_indexes())

    @property
    def can_save(self) -> bool:
        return self.eligible_count > 0

    def curated_flashcards(self) -> list[CuratedFlashcard]:
        """Approved and edited suggestions in their original order."""
        return [
            CuratedFlashcard(
                index=i,
                front=self._current[i].front,
                back=self._current[i].back,
                source=(
                    FlashcardSource.AI_EDITED
                    if self._statuses[i] is CurationStatus.EDITED
                    else FlashcardSource.AI_FULL
                ),
            )
            for i in self.eligible_indexes()
        ]

    def _state_name(self, index: int) -> str:
        if self.is_editing(index):
            return "editing"
        return str(self._statuses[index])

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._statuses):
            raise IndexError(f"No suggestion at index {index}")
