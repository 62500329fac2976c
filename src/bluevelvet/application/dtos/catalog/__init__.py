"""Catalog DTOs."""

from bluevelvet.application.dtos.catalog.category_dto import (
    CategoryDTO,
    CategoryPageDTO,
)

__all__ = ["CategoryDTO", "CategoryPageDTO"]
