"""Delete categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from bluevelvet.domain.catalog import CategoryHasChildrenError, CategoryNotFoundError

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository

logger = logging.getLogger(__name__)


class DeleteCategoryCommand:
    """Permanently delete a category that has no subcategories."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> None:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)

        if await self._category_repo.has_children(category_id):
            logger.warning(
                "Refusing to delete category with children: %s",
                category.name,
            )
            raise CategoryHasChildrenError(category_id, category.name)

        await self._category_repo.delete(category_id)
        logger.info("Category deleted: %s (%s)", category.name, category_id)


class ResetCategoriesCommand:
    """Delete every category, regardless of hierarchy."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ResetCategoriesCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> int:
        deleted = await self._category_repo.delete_all()
        logger.warning("Categories reset: %d deleted", deleted)
        return deleted
