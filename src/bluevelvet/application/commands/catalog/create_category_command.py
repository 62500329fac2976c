"""Create a new category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from bluevelvet.application.dtos.catalog import CategoryDTO
from bluevelvet.domain.catalog import (
    Category,
    CategoryNotFoundError,
    DuplicateCategoryNameError,
)

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Create a category, optionally below an existing parent."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        name: str,
        image: Optional[str] = None,
        enabled: bool = True,
        parent_id: Optional[UUID] = None,
    ) -> CategoryDTO:
        category = Category(name=name, image=image, enabled=enabled)

        if await self._category_repo.exists_by_name(category.name):
            logger.warning("Category name already taken: %s", category.name)
            raise DuplicateCategoryNameError(category.name)

        if parent_id is not None:
            parent = await self._category_repo.find_by_id(parent_id)
            if parent is None:
                raise CategoryNotFoundError(
                    category_id=parent_id,
                    message=f"Parent category not found with id: {parent_id}",
                )
            category.set_parent(parent)

        await self._category_repo.save(category)

        logger.info("Category created: %s (%s)", category.name, category.id)
        return CategoryDTO.from_entity(category)
