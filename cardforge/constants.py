"""
Application constants.

Limits shared by the request schemas, the domain entities and the API client.
"""

SOURCE_TEXT_MIN_LENGTH = 1000
SOURCE_TEXT_MAX_LENGTH = 10000

NUM_CARDS_MIN = 1
NUM_CARDS_MAX = 50

FLASHCARD_FRONT_MAX_LENGTH = 200
FLASHCARD_BACK_MAX_LENGTH = 500

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
