"""Get a single category."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from bluevelvet.application.dtos.catalog import CategoryDTO
from bluevelvet.domain.catalog import Category, CategoryNotFoundError

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository


class GetCategoryQuery:
    """Query to fetch one category by id or by name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetCategoryQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: UUID,
        with_children: bool = False,
    ) -> CategoryDTO:
        category = await self._get(category_id)
        if not with_children:
            return CategoryDTO.from_entity(category)

        children = await self._category_repo.find_children(category.id)
        return CategoryDTO.from_entity(category, children)

    async def by_name(self, name: str) -> CategoryDTO:
        category = await self._category_repo.find_by_name(name)
        if category is None:
            raise CategoryNotFoundError(name=name)
        return CategoryDTO.from_entity(category)

    async def _get(self, category_id: UUID) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id=category_id)
        return category
