"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from userhub.domain.user import UserRole

if TYPE_CHECKING:
    from userhub_auth import TokenPayload


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user.

    Built from the verified token claims only; the store is not consulted,
    so the values reflect the user at token issuance.
    """

    user_id: int
    email: str
    role: str = UserRole.USER.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def has_role(self, role: str) -> bool:
        return self.role == role

    @classmethod
    def from_token(cls, payload: TokenPayload) -> UserContext:
        return cls(user_id=payload.user_id, email=payload.email, role=payload.role)

    def __str__(self) -> str:
        return f"UserContext({self.email})"
