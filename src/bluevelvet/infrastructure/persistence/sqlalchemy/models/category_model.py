"""SQLAlchemy model for catalog categories."""

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bluevelvet.infrastructure.persistence.sqlalchemy.models.store_record import (
    StoreRecord,
)


class CategoryModel(StoreRecord):
    """Database model for product categories.

    ``parent_id`` references another row of the same table. The foreign key
    has no ON DELETE action, so a parent with children cannot be removed.
    SQLite only enforces this with ``PRAGMA foreign_keys=ON``, which
    ``init_db.create_engine`` sets on every connection.
    """

    __tablename__ = "category"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    image: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    enabled: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        index=True,
    )

    # Hierarchy support
    parent_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid,
        ForeignKey("category.id"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name={self.name})>"
