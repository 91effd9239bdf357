from .generate_flashcards_use_case import GenerateFlashcardsUseCase
from .list_generations_use_case import ListGenerationErrorLogsUseCase, ListGenerationsUseCase

__all__ = [
    "GenerateFlashcardsUseCase",
    "ListGenerationErrorLogsUseCase",
    "ListGenerationsUseCase",
]
