"""Catalog commands - operations on product categories."""

from bluevelvet.application.commands.catalog.create_category_command import (
    CreateCategoryCommand,
)
from bluevelvet.application.commands.catalog.delete_category_command import (
    DeleteCategoryCommand,
    ResetCategoriesCommand,
)
from bluevelvet.application.commands.catalog.seed_categories_command import (
    INITIAL_CATEGORIES,
    SeedCategoriesCommand,
)
from bluevelvet.application.commands.catalog.update_category_command import (
    UpdateCategoryCommand,
)

__all__ = [
    "INITIAL_CATEGORIES",
    "CreateCategoryCommand",
    "DeleteCategoryCommand",
    "ResetCategoriesCommand",
    "SeedCategoriesCommand",
    "UpdateCategoryCommand",
]
