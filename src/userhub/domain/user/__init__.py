"""User domain.

This domain handles:
- User aggregate (identity, profile, credential hash, role, status)
- Soft-delete lifecycle
- Repository interface for persistence
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.exceptions import (
    AccountInactiveError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from userhub.domain.user.repositories import UserRepository
from userhub.domain.user.value_objects import UserRole

__all__ = [
    "AccountInactiveError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
