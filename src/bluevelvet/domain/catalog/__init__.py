"""Catalog domain - product categories of the store.

Categories form a shallow tree: each category may point to a parent by id
and children are derived on demand. Names are unique across the whole
catalog.
"""

from bluevelvet.domain.catalog.exceptions import (
    CategoryHasChildrenError,
    CategoryNotFoundError,
    DuplicateCategoryNameError,
    InvalidCategoryError,
    InvalidSortError,
)
from bluevelvet.domain.catalog.entities import Category
from bluevelvet.domain.catalog.value_objects import (
    CategorySort,
    CategorySortField,
    Page,
    PageRequest,
    SortDirection,
)
from bluevelvet.domain.catalog.repositories import CategoryRepository

__all__ = [
    "Category",
    "CategoryHasChildrenError",
    "CategoryNotFoundError",
    "CategoryRepository",
    "CategorySort",
    "CategorySortField",
    "DuplicateCategoryNameError",
    "InvalidCategoryError",
    "InvalidSortError",
    "Page",
    "PageRequest",
    "SortDirection",
]
