"""DTOs for the user resource."""

from dataclasses import dataclass
from datetime import datetime

from userhub.domain.user import User


@dataclass(frozen=True)
class UserView:
    """Public view of a user. Never carries the password hash."""

    id: int
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        if user.id is None:
            msg = "Cannot build a view of an unsaved user"
            raise ValueError(msg)
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: UserView
