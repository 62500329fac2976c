"""API request/response schemas."""

from bluevelvet.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from bluevelvet.presentation.api.schemas.categories import (
    CategoryPageResponse,
    CategoryRequest,
    CategoryResponse,
    ResetResponse,
)
from bluevelvet.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "AuthResponse",
    "CategoryPageResponse",
    "CategoryRequest",
    "CategoryResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "ResetResponse",
    "UserResponse",
]
