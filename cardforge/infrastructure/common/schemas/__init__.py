"""Common infrastructure schemas."""

from cardforge.infrastructure.common.schemas.response_wrappers import (
    ErrorResponse,
    PaginatedResponse,
    PaginationMeta,
    SuccessResponse,
)

__all__ = [
    "ErrorResponse",
    "PaginatedResponse",
    "PaginationMeta",
    "SuccessResponse",
]
