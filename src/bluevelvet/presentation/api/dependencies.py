"""FastAPI dependency injection for the Blue Velvet API.

Provides dependencies for:
- Database sessions
- Repository factory
- Authentication services and the current user (from JWT)
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bluevelvet.application.dtos.auth import UserDTO
from bluevelvet.application.services import AuthenticationService
from bluevelvet.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    ensure_sqlite_directory,
)
from bluevelvet.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from bluevelvet.presentation.api.config import get_api_settings
from bluevelvet_auth import InvalidTokenError, JWTService, PasswordHashingService
from bluevelvet_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url
    ensure_sqlite_directory(url)
    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    SQLite connections get foreign key enforcement switched on.
    """
    return create_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get the repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


async def get_authentication_service(
    factory: RepoFactory,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService.from_factory(factory, password_service)


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserDTO:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await auth_service.get_user(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[UserDTO, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Commands and queries have from_factory() classmethods. Use them directly
# in routers:
#
#   async def list_categories(factory: RepoFactory, ...):
#       query = ListCategoriesQuery.from_factory(factory)  # NOQA: ERA001
