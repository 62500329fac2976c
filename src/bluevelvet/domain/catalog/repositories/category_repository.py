"""Category repository interface.

Defines the contract for Category persistence. Parent names are resolved
by the implementation so every returned Category carries ``parent_name``.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from bluevelvet.domain.catalog.entities import Category
from bluevelvet.domain.catalog.value_objects import CategorySort, Page, PageRequest


class CategoryRepository(ABC):
    """Repository interface for Category entities."""

    @abstractmethod
    async def save(self, category: Category) -> None:
        """
        Insert or update a category.

        Raises
        ------
        DuplicateCategoryNameError
            If the name collides with another category (unique constraint)
        CategoryNotFoundError
            If the parent no longer exists (foreign key)
        """

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find category by ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by exact name."""

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Check if a category with this exact name exists."""

    @abstractmethod
    async def find_page(
        self,
        page_request: PageRequest,
        sort: Optional[CategorySort] = None,
    ) -> Page[Category]:
        """Find a page of all categories, sorted by name unless told otherwise."""

    @abstractmethod
    async def find_top_level(self, page_request: PageRequest) -> Page[Category]:
        """Find a page of root categories ordered by name."""

    @abstractmethod
    async def find_children(self, parent_id: UUID) -> List[Category]:
        """Find the direct children of a category ordered by name."""

    @abstractmethod
    async def find_children_of(self, parent_ids: List[UUID]) -> List[Category]:
        """Find the direct children of several categories ordered by name."""

    @abstractmethod
    async def has_children(self, category_id: UUID) -> bool:
        """Check if a category has any direct children."""

    @abstractmethod
    async def search_by_name(
        self,
        fragment: str,
        page_request: PageRequest,
    ) -> Page[Category]:
        """Find a page of categories whose name contains ``fragment`` (any case)."""

    @abstractmethod
    async def find_enabled_page(self, page_request: PageRequest) -> Page[Category]:
        """Find a page of enabled categories ordered by name."""

    @abstractmethod
    async def find_all_enabled(self) -> List[Category]:
        """Find every enabled category ordered by name."""

    @abstractmethod
    async def find_enabled_top_level(self) -> List[Category]:
        """Find every enabled root category ordered by name."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find every category ordered by name."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored categories."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        """
        Delete a category.

        Raises
        ------
        CategoryHasChildrenError
            If another category still references it as parent (foreign key)
        """

    @abstractmethod
    async def delete_all(self) -> int:
        """Delete every category, returning how many rows were removed."""
