"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bluevelvet.domain.user import UserRole


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength and confirmation are checked by the authentication
    service so that failures surface as 400 with a domain error code.
    """

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., description="Password (at least 8 characters)")
    confirm_password: str = Field(..., description="Must equal password")
    role: UserRole | None = Field(
        default=None,
        description="administrator or shopper (defaults to shopper)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@x.com",
                "password": "abcdefgh",
                "confirm_password": "abcdefgh",
                "role": "shopper",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@x.com",
                "password": "abcdefgh",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: UUID
    email: str
    role: str
    enabled: bool

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response schema for authentication (login/register)."""

    id: UUID
    email: str
    role: str
    message: str
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b8e5d3c-2f0e-4a43-9d6c-2d8f3d1c9a10",
                "email": "a@x.com",
                "role": "shopper",
                "message": "Login successful. Welcome, a@x.com (shopper)",
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
            },
        },
    )
