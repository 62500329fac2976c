"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from bluevelvet.domain.catalog import (
    Category,
    CategoryHasChildrenError,
    CategoryNotFoundError,
    CategoryRepository,
    CategorySort,
    CategorySortField,
    DuplicateCategoryNameError,
    Page,
    PageRequest,
)
from bluevelvet.domain.shared.time import ensure_tz_aware
from bluevelvet.infrastructure.persistence.sqlalchemy.models import CategoryModel

logger = logging.getLogger(__name__)

_Parent = aliased(CategoryModel, name="parent")

_SORT_COLUMNS = {
    CategorySortField.ID: CategoryModel.id,
    CategorySortField.NAME: CategoryModel.name,
    CategorySortField.ENABLED: CategoryModel.enabled,
}


def _is_foreign_key_violation(message: str) -> bool:
    # SQLite: "FOREIGN KEY constraint failed", PostgreSQL: "violates foreign key"
    return "foreign key" in message.lower()


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the category repository.

    Reads select each row together with its parent's name through an outer
    self-join, so returned entities always carry ``parent_name``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, category: Category) -> None:
        model = await self._find_model_by_id(category.id)

        if model:
            logger.debug("Updating existing category: %s", category.name)
            self._update_model_from_domain(model, category)
        else:
            logger.debug("Creating new category: %s", category.name)
            self._session.add(self._create_model_from_domain(category))

        try:
            await self._session.flush()
        except IntegrityError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()

            msg = str(getattr(exc, "orig", exc))
            if "category.name" in msg or "ix_category_name" in msg:
                raise DuplicateCategoryNameError(category.name) from exc
            if _is_foreign_key_violation(msg):
                raise CategoryNotFoundError(
                    category_id=category.parent_id,
                    message=f"Parent category not found with id: {category.parent_id}",
                ) from exc

            error_msg = f"Failed to save category due to database constraint: {msg}"
            raise ValueError(error_msg) from exc

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        stmt = self._select().where(CategoryModel.id == category_id)
        return await self._fetch_one(stmt)

    async def find_by_name(self, name: str) -> Optional[Category]:
        stmt = self._select().where(CategoryModel.name == name)
        return await self._fetch_one(stmt)

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(CategoryModel.id).where(CategoryModel.name == name).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_page(
        self,
        page_request: PageRequest,
        sort: Optional[CategorySort] = None,
    ) -> Page[Category]:
        sort = sort or CategorySort()
        column = _SORT_COLUMNS[sort.field]
        order = [column.desc() if sort.descending else column.asc()]
        if sort.field != CategorySortField.NAME:
            order.append(CategoryModel.name.asc())
        return await self._fetch_page(self._select(), page_request, order)

    async def find_top_level(self, page_request: PageRequest) -> Page[Category]:
        stmt = self._select().where(CategoryModel.parent_id.is_(None))
        return await self._fetch_page(stmt, page_request)

    async def find_children(self, parent_id: UUID) -> list[Category]:
        stmt = (
            self._select()
            .where(CategoryModel.parent_id == parent_id)
            .order_by(CategoryModel.name.asc())
        )
        return await self._fetch_all(stmt)

    async def find_children_of(self, parent_ids: list[UUID]) -> list[Category]:
        if not parent_ids:
            return []
        stmt = (
            self._select()
            .where(CategoryModel.parent_id.in_(parent_ids))
            .order_by(CategoryModel.name.asc())
        )
        return await self._fetch_all(stmt)

    async def has_children(self, category_id: UUID) -> bool:
        stmt = (
            select(CategoryModel.id)
            .where(CategoryModel.parent_id == category_id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def search_by_name(
        self,
        fragment: str,
        page_request: PageRequest,
    ) -> Page[Category]:
        stmt = self._select().where(
            func.lower(CategoryModel.name).contains(fragment.lower(), autoescape=True),
        )
        return await self._fetch_page(stmt, page_request)

    async def find_enabled_page(self, page_request: PageRequest) -> Page[Category]:
        stmt = self._select().where(CategoryModel.enabled == True)  # NOQA: E712
        return await self._fetch_page(stmt, page_request)

    async def find_all_enabled(self) -> list[Category]:
        stmt = (
            self._select()
            .where(CategoryModel.enabled == True)  # NOQA: E712
            .order_by(CategoryModel.name.asc())
        )
        return await self._fetch_all(stmt)

    async def find_enabled_top_level(self) -> list[Category]:
        stmt = (
            self._select()
            .where(
                CategoryModel.enabled == True,  # NOQA: E712
                CategoryModel.parent_id.is_(None),
            )
            .order_by(CategoryModel.name.asc())
        )
        return await self._fetch_all(stmt)

    async def find_all(self) -> list[Category]:
        stmt = self._select().order_by(CategoryModel.name.asc())
        return await self._fetch_all(stmt)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(CategoryModel.id)))
        return result.scalar_one()

    async def delete(self, category_id: UUID) -> None:
        model = await self._find_model_by_id(category_id)

        if model is None:
            return

        name = model.name
        await self._session.delete(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()

            msg = str(getattr(exc, "orig", exc))
            if _is_foreign_key_violation(msg):
                raise CategoryHasChildrenError(category_id, name) from exc
            raise
        logger.debug("Category row deleted: %s", category_id)

    async def delete_all(self) -> int:
        # Detach children first so the self reference never blocks the delete
        await self._session.execute(update(CategoryModel).values(parent_id=None))
        result = await self._session.execute(delete(CategoryModel))
        await self._session.flush()
        return result.rowcount or 0

    def _select(self) -> Select:
        return select(CategoryModel, _Parent.name).outerjoin(
            _Parent,
            CategoryModel.parent_id == _Parent.id,
        )

    async def _fetch_one(self, stmt: Select) -> Optional[Category]:
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            return None
        return self._map_to_domain(row[0], row[1])

    async def _fetch_all(self, stmt: Select) -> list[Category]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model, parent) for model, parent in result.all()]

    async def _fetch_page(
        self,
        stmt: Select,
        page_request: PageRequest,
        order_by: Optional[list] = None,
    ) -> Page[Category]:
        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        ordered = stmt.order_by(*(order_by or [CategoryModel.name.asc()]))
        items = await self._fetch_all(
            ordered.offset(page_request.offset).limit(page_request.limit),
        )
        return Page(
            items=items,
            total=total,
            page=page_request.page,
            page_size=page_request.page_size,
        )

    async def _find_model_by_id(self, category_id: UUID) -> Optional[CategoryModel]:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(
        self,
        model: CategoryModel,
        parent_name: Optional[str] = None,
    ) -> Category:
        return Category.reconstitute(
            id=model.id,
            name=model.name,
            image=model.image,
            enabled=model.enabled,
            parent_id=model.parent_id,
            parent_name=parent_name,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _create_model_from_domain(self, category: Category) -> CategoryModel:
        return CategoryModel(
            id=category.id,
            name=category.name,
            image=category.image,
            enabled=category.enabled,
            parent_id=category.parent_id,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )

    def _update_model_from_domain(
        self,
        model: CategoryModel,
        category: Category,
    ) -> None:
        model.name = category.name
        model.image = category.image
        model.enabled = category.enabled
        model.parent_id = category.parent_id
