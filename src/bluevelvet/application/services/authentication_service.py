"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from bluevelvet.application.dtos.auth import AuthResult, UserDTO
from bluevelvet.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRole,
)
from bluevelvet_auth import (
    InvalidCredentialsError,
    PasswordHashingService,
    PasswordMismatchError,
)

if TYPE_CHECKING:
    from bluevelvet.application.factories import RepositoryFactory
    from bluevelvet.domain.user import UserRepository

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "User registered successfully"


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the generic bluevelvet_auth password hashing with the User
    aggregate to provide:
    - User registration
    - Login with password
    - Lookup of the user behind an issued token

    The service only verifies credentials. Issuing the session token is
    left to the HTTP boundary.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        password_service: PasswordHashingService,
    ) -> AuthenticationService:
        return cls(
            user_repository=factory.user_repository(),
            password_service=password_service,
        )

    async def register(
        self,
        email: str,
        password: str,
        confirm_password: str,
        role: Optional[UserRole] = None,
    ) -> AuthResult:
        """Register a new user.

        Raises
        ------
        InvalidEmailError
            If the email is malformed
        EmailAlreadyExistsError
            If a user with this email already exists
        WeakPasswordError
            If the password is too short or too long
        PasswordMismatchError
            If password and confirmation differ
        """
        normalized = Email(email)
        logger.debug("Registration attempt for %s", normalized)

        if await self._user_repo.exists_by_email(normalized):
            logger.warning("Registration rejected, email taken: %s", normalized)
            raise EmailAlreadyExistsError(normalized.value)

        self._password_service.validate_strength(password)

        if password != confirm_password:
            raise PasswordMismatchError

        password_hash = self._password_service.hash(password)
        user = User.create(
            normalized,
            password_hash=password_hash,
            role=role or UserRole.SHOPPER,
        )
        await self._user_repo.save(user)

        logger.info("User registered: %s (role: %s)", user.email, user.role.value)
        return AuthResult.from_entity(user, REGISTERED_MESSAGE)

    async def login(self, email: str, password: str) -> AuthResult:
        """Verify credentials.

        Unknown email and wrong password raise the same error with the same
        message.

        Raises
        ------
        InvalidCredentialsError
            If the email is unknown or the password does not match
        """
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError as e:
            raise InvalidCredentialsError from e

        if user is None:
            logger.warning("Login failed for unknown email")
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            logger.warning("Login failed for %s: wrong password", user.email)
            raise InvalidCredentialsError

        logger.info("User logged in: %s", user.email)
        message = f"Login successful. Welcome, {user.email} ({user.role.value})"
        return AuthResult.from_entity(user, message)

    async def get_user(self, user_id: UUID) -> Optional[UserDTO]:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return None
        return UserDTO.from_entity(user)
