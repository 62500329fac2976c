"""SQLAlchemy persistence layer."""

from bluevelvet.infrastructure.persistence.sqlalchemy.models import (
    Base,
    CategoryModel,
    UserModel,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories import (
    CategoryRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "CategoryModel",
    "CategoryRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
