"""SQLAlchemy model for User aggregate."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from bluevelvet.infrastructure.persistence.sqlalchemy.models.store_record import (
    StoreRecord,
)


class UserModel(StoreRecord):
    """
    SQLAlchemy model for persisting User aggregates.

    - email is unique (one account per address)
    - password_hash holds the bcrypt hash only

    Table: users
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"
