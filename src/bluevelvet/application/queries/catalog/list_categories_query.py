"""List categories query - paged, filtered and hierarchical listings."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING
from uuid import UUID

from bluevelvet.application.dtos.catalog import CategoryDTO, CategoryPageDTO
from bluevelvet.domain.catalog import (
    Category,
    CategoryNotFoundError,
    CategorySort,
    PageRequest,
)

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository


class ListCategoriesQuery:
    """Query to list categories for the admin dashboard and the shop.

    Every listing is ordered by name ascending unless a sort is given.
    Hierarchical listings materialize one level of children only.
    """

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def list_all(
        self,
        page: int = 1,
        page_size: int = 10,
        sort_by: str = "name",
        direction: str = "asc",
    ) -> CategoryPageDTO:
        """List every category.

        Raises
        ------
        InvalidSortError
            If the sort field is not one of id, name, enabled or the
            direction is neither asc nor desc
        """
        sort = CategorySort.parse(sort_by, direction)
        result = await self._category_repo.find_page(
            PageRequest(page=page, page_size=page_size),
            sort,
        )
        return CategoryPageDTO.from_page(result)

    async def list_top_level(
        self,
        page: int = 1,
        page_size: int = 5,
        with_children: bool = False,
    ) -> CategoryPageDTO:
        result = await self._category_repo.find_top_level(
            PageRequest(page=page, page_size=page_size),
        )
        if not with_children:
            return CategoryPageDTO.from_page(result)

        children = await self._children_by_parent(result.items)
        return CategoryPageDTO.from_page(result, children)

    async def list_subcategories(self, parent_id: UUID) -> list[CategoryDTO]:
        parent = await self._category_repo.find_by_id(parent_id)
        if parent is None:
            raise CategoryNotFoundError(category_id=parent_id)
        children = await self._category_repo.find_children(parent_id)
        return [CategoryDTO.from_entity(c) for c in children]

    async def search_by_name(
        self,
        name: str,
        page: int = 1,
        page_size: int = 10,
    ) -> CategoryPageDTO:
        result = await self._category_repo.search_by_name(
            name or "",
            PageRequest(page=page, page_size=page_size),
        )
        return CategoryPageDTO.from_page(result)

    async def list_enabled(
        self,
        page: int = 1,
        page_size: int = 10,
    ) -> CategoryPageDTO:
        result = await self._category_repo.find_enabled_page(
            PageRequest(page=page, page_size=page_size),
        )
        return CategoryPageDTO.from_page(result)

    async def list_enabled_for_shopper(self) -> list[CategoryDTO]:
        categories = await self._category_repo.find_all_enabled()
        return [CategoryDTO.from_entity(c) for c in categories]

    async def list_enabled_with_children(self) -> list[CategoryDTO]:
        """Enabled roots, each with its enabled direct children."""
        roots = await self._category_repo.find_enabled_top_level()
        children = await self._children_by_parent(roots, enabled_only=True)
        return [CategoryDTO.from_entity(root, children.get(root.id)) for root in roots]

    async def exists_by_name(self, name: str) -> bool:
        return await self._category_repo.exists_by_name(name)

    async def has_children(self, category_id: UUID) -> bool:
        return await self._category_repo.has_children(category_id)

    async def _children_by_parent(
        self,
        parents: list[Category],
        enabled_only: bool = False,
    ) -> dict[UUID, list[Category]]:
        if not parents:
            return {}

        children = await self._category_repo.find_children_of([p.id for p in parents])
        grouped: dict[UUID, list[Category]] = defaultdict(list)
        for child in children:
            if enabled_only and not child.enabled:
                continue
            grouped[child.parent_id].append(child)
        return dict(grouped)
