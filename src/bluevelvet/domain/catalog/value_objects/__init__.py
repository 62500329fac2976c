from bluevelvet.domain.catalog.value_objects.paging import (
    MAX_PAGE_SIZE,
    Page,
    PageRequest,
)
from bluevelvet.domain.catalog.value_objects.sorting import (
    CategorySort,
    CategorySortField,
    SortDirection,
)

__all__ = [
    "MAX_PAGE_SIZE",
    "CategorySort",
    "CategorySortField",
    "Page",
    "PageRequest",
    "SortDirection",
]
