"""Shared domain building blocks."""

from userhub.domain.shared.exceptions import (
    BadRequestError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from userhub.domain.shared.time import utc_now

__all__ = [
    "BadRequestError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "UnauthorizedError",
    "ValidationError",
    "utc_now",
]
