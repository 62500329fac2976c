"""Auth schemas and data structures.

Simple data classes used for transferring identity data between
components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    role
        The user's role value at the time the token was issued
    exp
        Token expiration timestamp
    """

    user_id: UUID
    email: str
    role: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
