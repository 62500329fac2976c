"""DTOs returned by the authentication service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from bluevelvet.domain.user import User


@dataclass(frozen=True)
class UserDTO:
    """User projection without the password hash."""

    id: UUID
    email: str
    role: str
    enabled: bool

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            enabled=user.enabled,
        )


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    id: UUID
    email: str
    role: str
    message: str

    @classmethod
    def from_entity(cls, user: User, message: str) -> AuthResult:
        return cls(
            id=user.id,
            email=user.email,
            role=user.role.value,
            message=message,
        )
