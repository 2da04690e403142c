"""Value objects for the user domain."""

from userhub.domain.user.value_objects.user_role import UserRole

__all__ = [
    "UserRole",
]
