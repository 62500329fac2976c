"""Sort order for category listings."""

from dataclasses import dataclass
from enum import Enum

from bluevelvet.domain.catalog.exceptions import InvalidSortError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        """Parse a direction, ignoring case."""
        try:
            return cls((value or "").strip().lower())
        except ValueError as e:
            msg = f"Invalid sort direction: {value}. Use 'asc' or 'desc'"
            raise InvalidSortError(msg, value) from e


class CategorySortField(str, Enum):
    ID = "id"
    NAME = "name"
    ENABLED = "enabled"

    @classmethod
    def parse(cls, value: str) -> "CategorySortField":
        try:
            return cls((value or "").strip())
        except ValueError as e:
            valid = ", ".join(f.value for f in cls)
            msg = f"Invalid sort field: {value}. Valid fields: {valid}"
            raise InvalidSortError(msg, value) from e


@dataclass(frozen=True)
class CategorySort:
    field: CategorySortField = CategorySortField.NAME
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, field: str = "name", direction: str = "asc") -> "CategorySort":
        return cls(
            field=CategorySortField.parse(field),
            direction=SortDirection.parse(direction),
        )

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC
