"""Tests for paging and sorting value objects."""

import pytest

from bluevelvet.domain.catalog import (
    CategorySort,
    CategorySortField,
    InvalidSortError,
    Page,
    PageRequest,
    SortDirection,
)
from bluevelvet.domain.shared.exceptions import ErrorCode, ValidationError


class TestPageRequest:
    def test_offset_is_one_based(self):
        assert PageRequest(page=1, page_size=10).offset == 0
        assert PageRequest(page=3, page_size=5).offset == 10

    @pytest.mark.parametrize(
        ("page", "page_size"),
        [(0, 10), (-1, 10), (1, 0), (1, 101)],
    )
    def test_rejects_out_of_range(self, page, page_size):
        with pytest.raises(ValidationError):
            PageRequest(page=page, page_size=page_size)

    def test_max_page_size_allowed(self):
        assert PageRequest(page=1, page_size=100).limit == 100


class TestPage:
    @pytest.mark.parametrize(
        ("total", "page_size", "pages"),
        [(0, 10, 1), (10, 10, 1), (11, 10, 2), (10, 5, 2)],
    )
    def test_pages(self, total, page_size, pages):
        assert Page(items=[], total=total, page_size=page_size).pages == pages

    def test_map_keeps_totals(self):
        page = Page(items=[1, 2], total=12, page=2, page_size=2)

        mapped = page.map(str)

        assert mapped.items == ["1", "2"]
        assert (mapped.total, mapped.page, mapped.page_size) == (12, 2, 2)


class TestCategorySort:
    def test_defaults_to_name_ascending(self):
        sort = CategorySort()

        assert sort.field == CategorySortField.NAME
        assert sort.direction == SortDirection.ASC
        assert sort.descending is False

    def test_direction_is_case_insensitive(self):
        assert CategorySort.parse("enabled", "DESC").descending is True
        assert CategorySort.parse("id", "Asc").direction == SortDirection.ASC

    def test_unknown_field_rejected(self):
        with pytest.raises(InvalidSortError, match="Invalid sort field") as exc_info:
            CategorySort.parse("image", "asc")

        assert exc_info.value.code == ErrorCode.INVALID_SORT

    def test_unknown_direction_rejected(self):
        with pytest.raises(InvalidSortError, match="Invalid sort direction"):
            CategorySort.parse("name", "sideways")
