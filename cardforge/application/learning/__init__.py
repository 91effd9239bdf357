"""
Learning bounded context - Application layer.

Contains use cases for AI generation and flashcard management:
- Generation: produce suggestions and record them in the ledger
- Commands: bulk create, update, delete flashcards
- Queries: list flashcards, generations and generation errors
"""
