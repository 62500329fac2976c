"""User domain - store accounts used for login.

This domain handles:
- User aggregate (identity, role, enabled flag, password hash)
- Email value object (validation, normalization)
- Repository interface (implementation in infrastructure)

Design notes:
- User ID is a random UUID4 generated at creation (opaque)
- Email is unique and used as the login key
- Users are created only through registration
"""

from bluevelvet.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
)
from bluevelvet.domain.user.value_objects import Email, UserRole
from bluevelvet.domain.user.aggregates import User
from bluevelvet.domain.user.repositories import UserRepository

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserRepository",
    "UserRole",
]
