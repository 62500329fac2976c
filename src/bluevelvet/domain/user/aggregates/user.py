from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from bluevelvet.domain.shared.time import utc_now
from bluevelvet.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    Holds the login identity of a store user. Each user is uniquely
    identified by a random UUID generated at creation time; the email is
    the login key. The password hash is carried for verification only and
    is never part of any projection.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole] = UserRole.SHOPPER,
        enabled: bool = True,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._email = Email.of(email)
        self._password_hash = password_hash
        self._id = id if id is not None else uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._enabled = enabled
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMINISTRATOR

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password_hash: str,
        role: UserRole = UserRole.SHOPPER,
    ) -> "User":
        return cls(
            email=email,
            password_hash=password_hash,
            role=role,
            enabled=True,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        password_hash: str,
        role: Union[str, UserRole],
        enabled: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            role=role,
            enabled=enabled,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
