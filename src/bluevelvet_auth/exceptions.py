"""Authentication exceptions.

These exceptions are raised by the bluevelvet_auth package and by the
AuthenticationService; the API layer maps them to 400/401 responses.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class PasswordMismatchError(AuthError):
    """Raised when a password and its confirmation differ."""

    def __init__(self, message: str = "Passwords do not match"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is the same whether the email is unknown or the password
    is wrong.
    """

    def __init__(
        self,
        message: str = "Incorrect email or password. Please try again",
    ):
        super().__init__(message)
