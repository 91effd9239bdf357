from .create_flashcards_use_case import CreateFlashcardsUseCase
from .delete_flashcard_use_case import DeleteFlashcardUseCase
from .get_flashcard_use_case import GetFlashcardUseCase, ListFlashcardsUseCase
from .update_flashcard_use_case import UpdateFlashcardUseCase

__all__ = [
    "CreateFlashcardsUseCase",
    "DeleteFlashcardUseCase",
    "GetFlashcardUseCase",
    "ListFlashcardsUseCase",
    "UpdateFlashcardUseCase",
]
