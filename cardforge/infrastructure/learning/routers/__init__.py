from .flashcards import router as flashcards_router
from .generations import router as generations_router

__all__ = ["flashcards_router", "generations_router"]
