"""
Application common module.

- Result: explicit success/failure values
- Pagination: paging and sorting parameters for list queries
- RequestLifecycle: idle / in-flight / success / error state of a request
"""

from .pagination import PaginatedResult, Pagination
from .request_lifecycle import RequestLifecycle, RequestState
from .result import Failure, Result, Success

__all__ = [
    "Failure",
    "PaginatedResult",
    "Pagination",
    "RequestLifecycle",
    "RequestState",
    "Result",
    "Success",
]
