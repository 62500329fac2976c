"""Paging value objects.

Pages are 1-based. A ``Page`` carries the slice of items together with
the totals a client needs to render pagination.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from bluevelvet.domain.shared.exceptions import ValidationError

T = TypeVar("T")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            msg = "Page number must be at least 1"
            raise ValidationError(msg, details={"page": self.page})
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            msg = f"Page size must be between 1 and {MAX_PAGE_SIZE}"
            raise ValidationError(msg, details={"page_size": self.page_size})

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def pages(self) -> int:
        if self.total <= 0:
            return 1
        return (self.total + self.page_size - 1) // self.page_size

    def map(self, fn) -> "Page":
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
        )
