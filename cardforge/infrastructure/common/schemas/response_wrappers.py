"""Common response wrapper schemas for API responses."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class PaginationMeta(BaseModel):
    page: int = Field(..., description="Current page (1-indexed)")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of items")


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    data: list[T]
    pagination: PaginationMeta


class ErrorResponse(BaseModel):
    """Error body with a machine-readable code."""

    error: str = Field(..., description="Short error title")
    code: str = Field(..., description="Machine-readable error code")
    message: str | None = Field(None, description="Human-readable explanation")
    details: Any = Field(None, description="Field-level validation errors")
