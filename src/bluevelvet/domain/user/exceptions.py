"""User domain exceptions."""

from bluevelvet.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email address fails format validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message=f"User with email {email} already exists",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )

