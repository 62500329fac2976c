"""Email address of a store user.

Addresses are stored, looked up and compared in one form: surrounding
whitespace removed and lower-cased. ``users.email`` holds at most
``EMAIL_MAX_LENGTH`` characters.
"""

import re
from dataclasses import dataclass
from typing import Union

from bluevelvet.domain.user.exceptions import InvalidEmailError

EMAIL_MAX_LENGTH = 255

# Applied to the normalized (lower-case) address
_ADDRESS_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9-]+(\.[a-z0-9-]+)*\.[a-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """A login address in its normalized form."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.normalize(self.value))

    @classmethod
    def of(cls, email: Union[str, "Email"]) -> "Email":
        return email if isinstance(email, Email) else cls(email)

    @staticmethod
    def normalize(raw: str) -> str:
        """Return the stored form of ``raw``.

        Raises
        ------
        InvalidEmailError
            If the address is blank, too long for the column or malformed
        """
        address = (raw or "").strip().lower()
        if not address:
            msg = "Email is required"
            raise InvalidEmailError(msg)
        if len(address) > EMAIL_MAX_LENGTH:
            msg = f"Email cannot exceed {EMAIL_MAX_LENGTH} characters"
            raise InvalidEmailError(msg)
        if not _ADDRESS_PATTERN.match(address):
            msg = f"'{raw.strip()}' is not a valid email address"
            raise InvalidEmailError(msg)
        return address

    def __str__(self) -> str:
        return self.value
