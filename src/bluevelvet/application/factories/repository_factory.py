"""Repository factory protocol for application layer."""

from typing import Any, Protocol

from bluevelvet.domain.catalog.repositories import CategoryRepository
from bluevelvet.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is `Any` so the application layer does not depend on
        a database implementation. The presentation layer uses it for
        commit/rollback.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...
