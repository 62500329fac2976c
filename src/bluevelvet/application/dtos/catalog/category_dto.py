"""DTOs for category query and command results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional
from uuid import UUID

if TYPE_CHECKING:
    from bluevelvet.domain.catalog import Category, Page


@dataclass(frozen=True)
class CategoryDTO:
    """Category projection.

    ``children`` is only populated by the "with children" reads, and only
    when the category actually has children; otherwise it is None.
    """

    id: UUID
    name: str
    image: Optional[str]
    enabled: bool
    parent_id: Optional[UUID] = None
    parent_name: Optional[str] = None
    children: Optional[tuple[CategoryDTO, ...]] = None

    @classmethod
    def from_entity(
        cls,
        category: Category,
        children: Optional[Iterable[Category]] = None,
    ) -> CategoryDTO:
        child_dtos = (
            tuple(cls.from_entity(child) for child in children) if children else ()
        )
        return cls(
            id=category.id,
            name=category.name,
            image=category.image,
            enabled=category.enabled,
            parent_id=category.parent_id,
            parent_name=category.parent_name,
            children=child_dtos or None,
        )

    @property
    def status(self) -> str:
        return "Active" if self.enabled else "Inactive"


@dataclass(frozen=True)
class CategoryPageDTO:
    """One page of category projections."""

    items: tuple[CategoryDTO, ...] = field(default_factory=tuple)
    total: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def pages(self) -> int:
        if self.total <= 0:
            return 1
        return (self.total + self.page_size - 1) // self.page_size

    @classmethod
    def from_page(
        cls,
        page: Page[Category],
        children_by_parent: Optional[dict[UUID, list[Category]]] = None,
    ) -> CategoryPageDTO:
        children_by_parent = children_by_parent or {}
        return cls(
            items=tuple(
                CategoryDTO.from_entity(c, children_by_parent.get(c.id))
                for c in page.items
            ),
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )
