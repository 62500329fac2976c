from bluevelvet.domain.user.value_objects.email import Email
from bluevelvet.domain.user.value_objects.user_role import UserRole

__all__ = ["Email", "UserRole"]
