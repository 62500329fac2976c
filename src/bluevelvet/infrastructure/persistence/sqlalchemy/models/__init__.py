"""SQLAlchemy models - importing this package registers every table."""

from bluevelvet.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.models.store_record import (
    Base,
    StoreRecord,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = ["Base", "CategoryModel", "StoreRecord", "UserModel"]
