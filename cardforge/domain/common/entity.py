"""
Base class for Entities.

Entities carry an identity that survives changes to their attributes: two
flashcards with the same id are the same card even after an edit.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wraps either a database-assigned integer or a UUID so that ids of
    different entities cannot be mixed up.
    """

    value: int | UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        if isinstance(self.value, int):
            return self.value
        raise TypeError(f"Cannot convert UUID-based {self.__class__.__name__} to int")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Integer ids are assigned by the database."""
        return cls(0)

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        if isinstance(self.value, int):
            return self.value
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Equality and hashing go through the id only.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
