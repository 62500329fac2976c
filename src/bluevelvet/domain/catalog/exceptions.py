"""Catalog domain exceptions."""

from uuid import UUID

from bluevelvet.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(
        self,
        category_id: str | UUID | None = None,
        name: str | None = None,
        message: str | None = None,
    ) -> None:
        if message:
            msg = message
        elif category_id is not None:
            msg = f"Category not found with id: {category_id}"
        elif name is not None:
            msg = f"Category not found with name: {name}"
        else:
            msg = "Category not found"
        super().__init__(
            message=msg,
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={
                "category_id": str(category_id) if category_id else None,
                "name": name,
            },
        )


class DuplicateCategoryNameError(ConflictError):
    """Raised when a category name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            message=f"Category name already exists: {name}",
            code=ErrorCode.DUPLICATE_CATEGORY_NAME,
            details={"name": name},
        )


class CategoryHasChildrenError(ConflictError):
    """Raised when deleting a category that still has subcategories."""

    def __init__(self, category_id: str | UUID, name: str | None = None) -> None:
        label = name or str(category_id)
        super().__init__(
            message=(
                f"Category '{label}' has subcategories and cannot be deleted. "
                "Remove or move its subcategories first."
            ),
            code=ErrorCode.CATEGORY_HAS_CHILDREN,
            details={"category_id": str(category_id), "name": name},
        )


class InvalidCategoryError(ValidationError):
    """Raised when category data fails validation."""


class InvalidSortError(ValidationError):
    """Raised when a sort field or direction is not supported."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_SORT,
            details={"value": value},
        )
