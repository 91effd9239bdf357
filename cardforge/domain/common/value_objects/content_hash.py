"""
ContentHash value object.

Identifies submitted source text in the generation ledger without storing
the text itself.
"""

import hashlib
from dataclasses import dataclass
from typing import Self

_CONTENT_HASH_LENGTH = 64


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 hex digest of a piece of text."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ContentHash cannot be empty")

        if len(self.value) != _CONTENT_HASH_LENGTH:
            raise ValueError("ContentHash must be 64 character hex string (SHA-256)")

        try:
            int(self.value, 16)
        except ValueError as err:
            raise ValueError("ContentHash must be valid hexadecimal string") from err

    @classmethod
    def compute(cls, content: str) -> Self:
        """
        Compute ContentHash from string content.

        Args:
            content: Text content to hash

        Returns:
            ContentHash instance with computed hash
        """
        if not content:
            raise ValueError("Cannot compute hash of empty content")

        hash_value = hashlib.sha256(content.encode("utf-8", "surrogatepass")).hexdigest()
        return cls(hash_value)

    def __str__(self) -> str:
        return self.value
