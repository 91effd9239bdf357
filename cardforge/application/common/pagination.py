"""
Pagination types for list queries.

Example:
    pagination = Pagination(page=2, page_size=10, sort_by="front", order="asc")
    result = repository.find_page(owner_id, pagination)
    result.items, result.total, result.total_pages
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from cardforge.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True)
class Pagination:
    """
    Pagination and sorting parameters for list queries.

    Attributes:
        page: Current page number (1-indexed)
        page_size: Number of items per page
        sort_by: Column to sort by; repositories whitelist the allowed values
        order: Sort direction
    """

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = "created_at"
    order: SortOrder = "desc"

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"Page size cannot exceed {MAX_PAGE_SIZE}")

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """Items of one page plus the total across all pages."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return (self.total + self.pagination.page_size - 1) // self.pagination.page_size
