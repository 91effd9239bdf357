from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from cardforge.core import container
from cardforge.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The request-scoped database session is bound to container.db while the
    use case and its repositories are built.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
