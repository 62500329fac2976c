from enum import Enum


class UserRole(str, Enum):
    """User roles (store administrators vs. regular shoppers)."""

    ADMINISTRATOR = "administrator"
    SHOPPER = "shopper"
