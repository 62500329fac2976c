"""Blue Velvet auth - generic authentication infrastructure.

This package is independent of the store's catalog domain. It handles:
- Password hashing (bcrypt)
- JWT access token creation and verification
- Authentication exceptions

Usage:
    from bluevelvet_auth import PasswordHashingService, JWTService
"""

from bluevelvet_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordMismatchError,
    WeakPasswordError,
)
from bluevelvet_auth.schemas import TokenPayload
from bluevelvet_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordMismatchError",
    "WeakPasswordError",
]
