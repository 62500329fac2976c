"""Authentication router for user registration, login, and the current user."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from bluevelvet.application.dtos.auth import AuthResult
from bluevelvet.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    JWTServiceDep,
    RepoFactory,
)
from bluevelvet.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from bluevelvet.presentation.api.schemas.common import ErrorResponse
from bluevelvet_auth import JWTService

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(result: AuthResult, jwt_service: JWTService) -> AuthResponse:
    access_token = jwt_service.create_access_token(
        user_id=result.id,
        email=result.email,
        role=result.role,
    )
    return AuthResponse(
        id=result.id,
        email=result.email,
        role=result.role,
        message=result.message,
        access_token=access_token,
        expires_in=jwt_service.access_token_lifetime_seconds,
    )


@router.get("/", include_in_schema=False)
async def auth_root() -> RedirectResponse:
    """Send browsers hitting the auth root to the login page."""
    return RedirectResponse(url="/login")


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Weak or mismatched password"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
    factory: RepoFactory,
) -> AuthResponse:
    """
    Register a new account with email and password.

    The role defaults to `shopper`. Returns an access token so the new
    user is signed in right away.
    """
    try:
        result = await auth_service.register(
            email=request.email,
            password=request.password,
            confirm_password=request.confirm_password,
            role=request.role,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    logger.info("New user registered: %s", result.email)
    return _create_auth_response(result, jwt_service)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    jwt_service: JWTServiceDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password both answer 401 with the same message.
    """
    result = await auth_service.login(email=request.email, password=request.password)
    return _create_auth_response(result, jwt_service)


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    """Return the user behind the bearer token."""
    return UserResponse(
        id=current_user.id,
        email=current_user.email,
        role=current_user.role,
        enabled=current_user.enabled,
    )
