"""Export categories query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bluevelvet.application.dtos.catalog import CategoryDTO

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.catalog import CategoryRepository

logger = logging.getLogger(__name__)


class ExportCategoriesQuery:
    """Query to export every category as flat projections ordered by name."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ExportCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CategoryDTO]:
        categories = await self._category_repo.find_all()
        logger.info("Exporting %d categories", len(categories))
        return [CategoryDTO.from_entity(c) for c in categories]
