"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from bluevelvet.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # NOQA: E501
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share the one session handed in, so a request's
    commands run inside a single transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo
