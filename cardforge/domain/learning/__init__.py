"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard creation and management
- AI generation ledger (successful and failed attempts)
- Review of AI suggestions before they are saved
"""
