"""Catalog queries."""

from bluevelvet.application.queries.catalog.export_categories_query import (
    ExportCategoriesQuery,
)
from bluevelvet.application.queries.catalog.get_category_query import (
    GetCategoryQuery,
)
from bluevelvet.application.queries.catalog.list_categories_query import (
    ListCategoriesQuery,
)

__all__ = ["ExportCategoriesQuery", "GetCategoryQuery", "ListCategoriesQuery"]
