"""userhub auth - generic authentication infrastructure.

This package is independent of the user domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    userhub_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from userhub_auth import JWTService, PasswordHashingService
"""

from userhub_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    WeakPasswordError,
)
from userhub_auth.schemas import TokenPayload
from userhub_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
]
