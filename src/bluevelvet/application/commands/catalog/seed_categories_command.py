"""Load the initial set of store categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bluevelvet.domain.catalog import Category

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository

logger = logging.getLogger(__name__)

# (name, image) pairs of the store's opening catalog
INITIAL_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Rock", "rock.png"),
    ("Pop", "pop.png"),
    ("Jazz", "jazz.png"),
    ("Blues", "blues.png"),
    ("Classical", "classical.png"),
    ("Hip Hop", "hiphop.png"),
    ("Electronic", "electronic.png"),
    ("Country", "country.png"),
    ("Reggae", "reggae.png"),
    ("Metal", "metal.png"),
)


class SeedCategoriesCommand:
    """Insert the initial categories into an empty catalog."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SeedCategoriesCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> int:
        """Return the number of categories inserted (0 if not empty)."""
        if await self._category_repo.count() > 0:
            logger.info("Catalog not empty, skipping seed")
            return 0

        for name, image in INITIAL_CATEGORIES:
            await self._category_repo.save(Category(name=name, image=image))

        logger.info("Seeded %d categories", len(INITIAL_CATEGORIES))
        return len(INITIAL_CATEGORIES)
