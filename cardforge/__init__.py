"""cardforge: AI-assisted flashcard generation and curation backend."""

__version__ = "0.1.0"
