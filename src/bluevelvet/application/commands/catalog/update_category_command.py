"""Update an existing category."""

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


class UpdateCategoryCommand:
    """Update name, enabled flag and parent of a category.

    The parent is always rewritten: a missing ``parent_id`` turns the
    category into a root. ``image`` is accepted for form compatibility and
    not applied; only creation stores an image reference.
    """

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(  # noqa: PLR0913
        self,
        category_id: UUID,
        name: str,
        enabled: Optional[bool] = None,
        parent_id: Optional[UUID] = None,
        image: Optional[str] = None,
    ) -> CategoryDTO:
        category = await self._get_category(category_id)

        await self._update_name(category, name)

        if enabled is not None:
            category.set_enabled(enabled)

        await self._update_parent(category, parent_id)

        if image is not None:
            logger.debug("Ignoring image on update of category %s", category_id)

        await self._category_repo.save(category)

        logger.info("Category updated: %s (%s)", category.name, category.id)
        return CategoryDTO.from_entity(category)

    async def _get_category(self, category_id: UUID) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        return category

    async def _update_name(self, category: Category, name: str) -> None:
        new_name = (name or "").strip()
        if new_name != category.name and await self._category_repo.exists_by_name(
            new_name,
        ):
            logger.warning("Category name already taken: %s", new_name)
            raise DuplicateCategoryNameError(new_name)
        category.rename(name)

    async def _update_parent(
        self,
        category: Category,
        parent_id: Optional[UUID],
    ) -> None:
        if parent_id is None:
            category.make_root()
            return

        parent = await self._category_repo.find_by_id(parent_id)
        if parent is None:
            raise CategoryNotFoundError(
                category_id=parent_id,
                message=f"Parent category not found with id: {parent_id}",
            )
        category.set_parent(parent)
