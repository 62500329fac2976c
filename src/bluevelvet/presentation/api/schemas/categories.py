"""Category schemas for API request/response models."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bluevelvet.application.dtos.catalog import CategoryDTO, CategoryPageDTO


class CategoryRequest(BaseModel):
    """Request schema for creating or updating a category.

    On update, ``image`` is accepted and ignored, an omitted ``enabled``
    keeps the current value, and an omitted ``parent_id`` makes the
    category a root.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Unique name")
    image: Optional[str] = Field(None, max_length=255, description="Image reference")
    enabled: Optional[bool] = Field(None, description="Visible to shoppers")
    parent_id: Optional[UUID] = Field(None, description="Parent category ID")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Metal",
                "image": "metal.png",
                "enabled": True,
                "parent_id": "0b8e5d3c-2f0e-4a43-9d6c-2d8f3d1c9a10",
            },
        },
    )


class CategoryResponse(BaseModel):
    """Response schema for a category.

    ``children`` is only filled by the hierarchical endpoints and only for
    categories that have subcategories.
    """

    id: UUID
    name: str
    image: Optional[str] = None
    enabled: bool
    parent_id: Optional[UUID] = None
    parent_name: Optional[str] = None
    children: Optional[list[CategoryResponse]] = None

    @classmethod
    def from_dto(cls, dto: CategoryDTO) -> CategoryResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            image=dto.image,
            enabled=dto.enabled,
            parent_id=dto.parent_id,
            parent_name=dto.parent_name,
            children=(
                [cls.from_dto(child) for child in dto.children]
                if dto.children
                else None
            ),
        )


class CategoryPageResponse(BaseModel):
    """A page of categories."""

    items: list[CategoryResponse] = Field(..., description="Categories on this page")
    total: int = Field(..., description="Total number of matching categories")
    page: int = Field(..., description="Current page number (1-based)")
    page_size: int = Field(..., description="Items per page")
    pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_dto(cls, dto: CategoryPageDTO) -> CategoryPageResponse:
        return cls(
            items=[CategoryResponse.from_dto(item) for item in dto.items],
            total=dto.total,
            page=dto.page,
            page_size=dto.page_size,
            pages=dto.pages,
        )


class ResetResponse(BaseModel):
    """Response schema for the catalog reset."""

    message: str
    deleted: int
